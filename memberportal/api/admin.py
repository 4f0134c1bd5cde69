# Third-party
from django.contrib import admin
from django.utils import timezone

# First-party/Local
from memberportal.api.models import GenerationRole, Member, MemberTeamRelation, Team, TeamLeader, User


def soft_delete(modeladmin, request, queryset):
    queryset.filter(deleted_at__isnull=True).update(deleted_at=timezone.now())


soft_delete.short_description = "Mark selected members as deleted"


class MemberTeamRelationInline(admin.TabularInline):
    model = MemberTeamRelation
    extra = 0


class MemberAdmin(admin.ModelAdmin):
    list_display = ("user", "generation", "status", "student_number", "is_admin", "deleted_at")
    list_filter = ("status", "generation", "is_admin")
    search_fields = ("user__name", "user__username", "student_number", "discord_uid")
    inlines = (MemberTeamRelationInline,)
    actions = [soft_delete]


class TeamLeaderInline(admin.TabularInline):
    model = TeamLeader
    extra = 0


class TeamAdmin(admin.ModelAdmin):
    list_display = ("name", "discord_role_id", "created")
    search_fields = ("name",)
    inlines = (TeamLeaderInline,)


class UserAdmin(admin.ModelAdmin):
    list_display = ("username", "name", "discord_uid", "last_login")
    search_fields = ("username", "name", "discord_uid")


admin.site.register(GenerationRole)
admin.site.register(Member, MemberAdmin)
admin.site.register(Team, TeamAdmin)
admin.site.register(User, UserAdmin)
