from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired
from wtforms.validators import ValidationError


class ImageUploadForm(FlaskForm):
    image = FileField('Image', validators=[FileRequired(message="An image file is required.")])

    def validate_image(self, field):
        mimetype = field.data.mimetype or ""
        if not mimetype.startswith("image/"):
            raise ValidationError("Please upload an image (PNG, JPEG or WebP).")
