from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="BrevoConfiguration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("api_key", models.CharField(blank=True, max_length=255, verbose_name="Brevo API Key")),
                ("list_id", models.CharField(blank=True, max_length=32, verbose_name="Brevo List")),
            ],
            options={
                "verbose_name": "Brevo configuration",
                "verbose_name_plural": "Brevo configuration",
            },
        ),
    ]
