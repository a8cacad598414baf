# reviews/forms.py
from django import forms


# Values are stored exactly as submitted, so nothing is stripped or length-capped.
class ReviewRequestForm(forms.Form):
    code = forms.CharField(strip=False)
    language = forms.CharField(strip=False)
    # Unknown values fall back to the performance focus.
    reviewType = forms.CharField(strip=False, required=False)
    userId = forms.CharField(strip=False)

    def clean_reviewType(self):
        return self.cleaned_data.get("reviewType") or "all"


class TestGenerationForm(forms.Form):
    code = forms.CharField(strip=False)
    language = forms.CharField(strip=False)
