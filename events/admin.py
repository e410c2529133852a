from django.contrib import admin

from events.models import Event, Registration


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    readonly_fields = ["user_id", "registered_at", "token", "document_url"]
    can_delete = False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "speaker", "date", "registered_seats", "total_seats"]
    search_fields = ["name", "speaker", "room_assignment"]
    readonly_fields = ["registered_seats"]
    inlines = [RegistrationInline]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["user_id", "event", "registered_at"]
    list_filter = ["event"]
    readonly_fields = ["token"]
