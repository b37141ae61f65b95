"""
Watch catalog forms.
"""
from datetime import date

from flask_wtf import FlaskForm
from wtforms import BooleanField, DecimalField, SelectField, StringField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional

from app.models import Watch


class CreateWatchForm(FlaskForm):
    """Form for adding a watch to the catalog."""

    brand = StringField(
        'Brand',
        validators=[
            DataRequired(message='You must specify a brand name.'),
            Length(max=100)
        ],
        render_kw={'placeholder': 'Brand Name.'}
    )

    model = StringField(
        'Model',
        validators=[
            DataRequired(message='You must specify a model.'),
            Length(max=100)
        ],
        render_kw={'placeholder': 'Model reference.'}
    )

    price = DecimalField(
        'Price',
        validators=[
            InputRequired(message='All watches have a value.'),
            NumberRange(min=0, message='Price must be zero or greater.')
        ],
        places=2,
        render_kw={'placeholder': 'Price.', 'step': '0.01', 'min': '0'}
    )

    description = TextAreaField(
        'Description',
        validators=[Optional(), Length(max=1000)],
        render_kw={'rows': 3, 'placeholder': 'A short description.'}
    )

    image_url = StringField(
        'Image URL',
        validators=[Optional(), Length(max=2048)],
        render_kw={'placeholder': 'Link to model image.'}
    )

    release_year = SelectField(
        'Release Year',
        coerce=int,
        validators=[InputRequired(message='Please select a year of manufacture.')]
    )

    is_available = BooleanField('Check box if available.')

    category_id = SelectField(
        'Category',
        coerce=int,
        validators=[InputRequired(message='Please select a category.')]
    )

    def __init__(self, *args, categories=(), min_year=1900, **kwargs):
        super().__init__(*args, **kwargs)
        # Newest year first, down to min_year
        self.release_year.choices = [
            (year, str(year)) for year in range(date.today().year, min_year - 1, -1)
        ]
        self.category_id.choices = [(c.id, c.name) for c in categories]

    def to_watch(self) -> Watch:
        """Build an unsaved Watch from validated form data."""
        return Watch(
            brand=self.brand.data.strip(),
            model=self.model.data.strip(),
            price=self.price.data,
            description=(self.description.data or '').strip() or None,
            image_url=(self.image_url.data or '').strip() or None,
            release_year=self.release_year.data,
            is_available=bool(self.is_available.data),
            category_id=self.category_id.data,
        )
