from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="NewsItem",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200, verbose_name="Title")),
                ("content", models.TextField(verbose_name="Content")),
                ("category", models.CharField(
                    choices=[
                        ("Cultural", "Cultural"),
                        ("Laboratory", "Laboratory"),
                        ("Training", "Training"),
                        ("Academic", "Academic"),
                        ("Sports", "Sports"),
                        ("Other", "Other"),
                    ],
                    default="Cultural",
                    max_length=20,
                    verbose_name="Category",
                )),
                ("date", models.DateField(verbose_name="Date")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "News Item",
                "verbose_name_plural": "News",
                "db_table": "news",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="GalleryItem",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200, verbose_name="Title")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("image_url", models.URLField(max_length=500, verbose_name="Image URL")),
                ("date", models.DateField(verbose_name="Date")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Gallery Item",
                "verbose_name_plural": "Gallery",
                "db_table": "gallery",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Program",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="Program Name")),
                ("description", models.TextField(verbose_name="Description")),
                ("duration", models.CharField(max_length=50, verbose_name="Duration")),
                ("eligibility", models.CharField(max_length=255, verbose_name="Eligibility")),
                ("fee", models.PositiveIntegerField(default=0, verbose_name="Annual Fee (₹)")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Program",
                "verbose_name_plural": "Programs",
                "db_table": "programs",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="CulturalProgram",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="Name")),
                ("description", models.TextField(verbose_name="Description")),
                ("type", models.CharField(
                    choices=[
                        ("event", "Event"),
                        ("workshop", "Workshop"),
                        ("competition", "Competition"),
                        ("festival", "Festival"),
                    ],
                    default="event",
                    max_length=20,
                    verbose_name="Type",
                )),
                ("date", models.DateField(verbose_name="Date")),
                ("time", models.CharField(blank=True, max_length=50, verbose_name="Time")),
                ("venue", models.CharField(max_length=200, verbose_name="Venue")),
                ("status", models.CharField(
                    choices=[
                        ("upcoming", "Upcoming"),
                        ("ongoing", "Ongoing"),
                        ("completed", "Completed"),
                    ],
                    default="upcoming",
                    max_length=20,
                    verbose_name="Status",
                )),
                ("eligibility", models.CharField(blank=True, max_length=255, verbose_name="Eligibility")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Cultural Program",
                "verbose_name_plural": "Cultural Programs",
                "db_table": "cultural_programs",
                "ordering": ["date"],
            },
        ),
    ]
