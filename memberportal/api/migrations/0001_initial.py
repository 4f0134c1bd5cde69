import uuid

import django.contrib.auth.models
import django.contrib.auth.validators
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import django_extensions.db.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        error_messages={"unique": "A user with that username already exists."},
                        help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
                        max_length=150,
                        unique=True,
                        validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                        verbose_name="username",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.",
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("auth_id", models.CharField(max_length=128, primary_key=True, serialize=False)),
                ("name", models.CharField(blank=True, max_length=256)),
                ("discord_uid", models.CharField(blank=True, max_length=64)),
                ("avatar_url", models.URLField(blank=True, max_length=512)),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "db_table": "memberportal_user",
                "ordering": ("username",),
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="GenerationRole",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", django_extensions.db.fields.CreationDateTimeField(auto_now_add=True, verbose_name="created")),
                ("modified", django_extensions.db.fields.ModificationDateTimeField(auto_now=True, verbose_name="modified")),
                ("generation", models.PositiveIntegerField(unique=True)),
                ("discord_role_id", models.CharField(max_length=64)),
            ],
            options={
                "db_table": "memberportal_generationrole",
                "ordering": ("-generation",),
            },
        ),
        migrations.CreateModel(
            name="Team",
            fields=[
                ("created", django_extensions.db.fields.CreationDateTimeField(auto_now_add=True, verbose_name="created")),
                ("modified", django_extensions.db.fields.ModificationDateTimeField(auto_now=True, verbose_name="modified")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=256, unique=True)),
                ("discord_role_id", models.CharField(max_length=64)),
            ],
            options={
                "db_table": "memberportal_team",
                "ordering": ("name",),
            },
        ),
        migrations.CreateModel(
            name="Member",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "status",
                    models.PositiveSmallIntegerField(
                        choices=[(0, "Junior high school"), (1, "High school"), (2, "Alumni")]
                    ),
                ),
                (
                    "generation",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(0)]),
                ),
                (
                    "student_number",
                    models.CharField(
                        blank=True,
                        max_length=32,
                        null=True,
                        validators=[
                            django.core.validators.RegexValidator(
                                "^[0-9]+$", "Student number must be digits only"
                            )
                        ],
                    ),
                ),
                ("discord_uid", models.CharField(blank=True, max_length=64)),
                ("avatar_url", models.URLField(blank=True, max_length=512, null=True)),
                ("is_admin", models.BooleanField(default=False)),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="members",
                        to="api.user",
                    ),
                ),
            ],
            options={
                "db_table": "memberportal_member",
                "ordering": ("-generation", "student_number"),
            },
        ),
        migrations.CreateModel(
            name="MemberTeamRelation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", django_extensions.db.fields.CreationDateTimeField(auto_now_add=True, verbose_name="created")),
                ("modified", django_extensions.db.fields.ModificationDateTimeField(auto_now=True, verbose_name="modified")),
                (
                    "member",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="team_relations",
                        to="api.member",
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="member_relations",
                        to="api.team",
                    ),
                ),
            ],
            options={
                "db_table": "memberportal_memberteamrelation",
                "unique_together": {("member", "team")},
            },
        ),
        migrations.CreateModel(
            name="TeamLeader",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", django_extensions.db.fields.CreationDateTimeField(auto_now_add=True, verbose_name="created")),
                ("modified", django_extensions.db.fields.ModificationDateTimeField(auto_now=True, verbose_name="modified")),
                (
                    "member",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="leader_relations",
                        to="api.member",
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="leader_relations",
                        to="api.team",
                    ),
                ),
            ],
            options={
                "db_table": "memberportal_teamleader",
                "unique_together": {("team", "member")},
            },
        ),
        migrations.AddField(
            model_name="member",
            name="teams",
            field=models.ManyToManyField(
                related_name="members", through="api.MemberTeamRelation", to="api.team"
            ),
        ),
        migrations.AddField(
            model_name="team",
            name="leaders",
            field=models.ManyToManyField(
                related_name="led_teams", through="api.TeamLeader", to="api.member"
            ),
        ),
        migrations.AddConstraint(
            model_name="member",
            constraint=models.UniqueConstraint(
                condition=models.Q(deleted_at__isnull=True),
                fields=("user",),
                name="unique_active_member_per_user",
            ),
        ),
    ]
