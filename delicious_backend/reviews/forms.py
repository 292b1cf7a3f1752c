# reviews/forms.py

from django import forms

from reviews.models import Review


class ReviewForm(forms.ModelForm):
    rating = forms.TypedChoiceField(
        choices=[(n, str(n)) for n in range(Review.RATING_MIN, Review.RATING_MAX + 1)],
        coerce=int,
        widget=forms.RadioSelect,
    )

    class Meta:
        model = Review
        fields = ["text", "rating"]
        error_messages = {
            "text": {"required": "Your review needs some text!"},
        }
