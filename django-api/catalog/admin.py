from django.contrib import admin

from catalog.models import StoredCollection


@admin.register(StoredCollection)
class StoredCollectionAdmin(admin.ModelAdmin):
    list_display = ["name", "size", "updated_at"]
    search_fields = ["name"]
    readonly_fields = ["name", "created_at", "updated_at"]
    exclude = ["payload"]
