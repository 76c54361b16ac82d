from django import forms

from common.utils import sanitize_text_field


class HistorySettingsForm(forms.Form):
    """Form for the geolocation API key"""
    api_key = forms.CharField(
        required=False,
        max_length=255,
        label="API Key",
        widget=forms.TextInput(attrs={'class': 'form-control', 'style': 'width: 300px;'}),
    )

    def clean_api_key(self):
        return sanitize_text_field(self.cleaned_data.get('api_key', ''))
