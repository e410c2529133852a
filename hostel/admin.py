from django.contrib import admin

from hostel.models import Complaint, HostelRoom, RoomRequest


@admin.register(HostelRoom)
class HostelRoomAdmin(admin.ModelAdmin):
    list_display = ["room_number", "block", "capacity"]
    list_filter = ["block"]


@admin.register(RoomRequest)
class RoomRequestAdmin(admin.ModelAdmin):
    list_display = ["user_id", "request_type", "status", "submitted_at"]
    list_filter = ["status", "request_type"]


@admin.register(Complaint)
class ComplaintAdmin(admin.ModelAdmin):
    list_display = ["user_id", "category", "status", "submitted_at"]
    list_filter = ["status", "category"]
