from django.contrib import admin

from volunteers.models import Volunteer, VolunteerAssignment


class VolunteerAssignmentInline(admin.TabularInline):
    model = VolunteerAssignment
    extra = 1


@admin.register(Volunteer)
class VolunteerAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "created_at"]
    search_fields = ["name", "email"]
    inlines = [VolunteerAssignmentInline]
