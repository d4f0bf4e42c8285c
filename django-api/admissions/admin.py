from django.contrib import admin

from admissions.models import EventConfig, GroupBooking, GroupMember, PriceTier


class PriceTierInline(admin.TabularInline):
    model = PriceTier
    extra = 1


class GroupMemberInline(admin.TabularInline):
    model = GroupMember
    extra = 0
    readonly_fields = ["member_id", "original_tier_name", "original_tier_price", "check_in_time", "surcharge"]


@admin.register(EventConfig)
class EventConfigAdmin(admin.ModelAdmin):
    list_display = ["name", "date", "cover_charge_type", "group_booking_enabled", "max_group_size"]
    search_fields = ["id", "name"]
    inlines = [PriceTierInline]


@admin.register(GroupBooking)
class GroupBookingAdmin(admin.ModelAdmin):
    list_display = ["host_name", "event", "group_size", "booking_time", "original_tier_price", "status"]
    list_filter = ["status", "event"]
    readonly_fields = ["qr_code", "original_tier_name", "original_tier_start_time", "original_tier_price"]
    inlines = [GroupMemberInline]
