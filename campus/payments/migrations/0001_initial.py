# payments/migrations/0001_initial.py

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('students', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('exam_period', models.CharField(
                    choices=[
                        ('downpayment', 'Downpayment'),
                        ('1st Periodic', '1st Periodic'),
                        ('Prelim', 'Prelim'),
                        ('2nd Periodic', '2nd Periodic'),
                        ('Midterm', 'Midterm'),
                        ('3rd Periodic', '3rd Periodic'),
                        ('Pre-final', 'Pre-final'),
                        ('4th Periodic', '4th Periodic'),
                        ('Finals', 'Finals'),
                    ],
                    help_text='Billing milestone this payment covers.',
                    max_length=20,
                )),
                ('amount', models.DecimalField(decimal_places=2, help_text='Amount received.', max_digits=10)),
                ('paid_on', models.DateField(
                    default=django.utils.timezone.localdate,
                    help_text='Date the money was received.',
                )),
                ('reference', models.CharField(
                    blank=True,
                    help_text='Official receipt number or bank reference.',
                    max_length=100,
                )),
                ('note', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('student', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='payments',
                    to='students.student',
                )),
            ],
            options={
                'verbose_name': 'Payment',
                'verbose_name_plural': 'Payments',
                'ordering': ['student', 'paid_on', 'created_at'],
            },
        ),
    ]
