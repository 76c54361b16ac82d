from django.db import models


class HistorySettings(models.Model):
    """
    Edit history settings (singleton pattern - only one instance)
    """
    api_key = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Token for the IP geolocation service (ipinfo.io)",
        verbose_name="API Key"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Edit History Settings'
        verbose_name_plural = 'Edit History Settings'

    def save(self, *args, **kwargs):
        # Always write to the single row
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Get or create the singleton instance"""
        obj, _ = cls.objects.get_or_create(pk=1)
        return obj

    def __str__(self):
        return "Edit History Settings"
