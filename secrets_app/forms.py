from flask import flash
from flask_wtf import FlaskForm
from wtforms import PasswordField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, ValidationError

from .utils.passwords import MAX_PASSWORD_BYTES, password_too_long


def password_byte_limit(form, field):
    if field.data and password_too_long(field.data):
        raise ValidationError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes.")


def flash_errors(form, category="warning"):
    for name, errors in form.errors.items():
        label = getattr(form, name).label.text
        for error in errors:
            flash(f"{label}: {error}", category)


class RegisterForm(FlaskForm):
    username = StringField('Email', validators=[DataRequired(), Length(max=255)])
    password = PasswordField('Password', validators=[DataRequired(), password_byte_limit])
    submit = SubmitField('Register')


class LoginForm(FlaskForm):
    username = StringField('Email', validators=[DataRequired(), Length(max=255)])
    password = PasswordField('Password', validators=[DataRequired(), password_byte_limit])
    submit = SubmitField('Login')


class SubmitForm(FlaskForm):
    secret = TextAreaField('Your secret', validators=[DataRequired()])
    submit = SubmitField('Submit')
