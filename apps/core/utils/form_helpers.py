from django import forms


class DateInput(forms.DateInput):
    """
    Custom DateInput widget with HTML5 date type.
    """
    input_type = 'date'

    def __init__(self, attrs=None):
        default_attrs = {'class': 'form-control'}
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs)


class DigitsInput(forms.TextInput):
    """
    Numeric-only text input (phone, Aadhar). The browser refuses non-digit
    keystrokes; the form still validates on submit.
    """

    def __init__(self, attrs=None, max_length=None):
        default_attrs = {
            'class': 'form-control',
            'inputmode': 'numeric',
            'pattern': '[0-9]*',
        }
        if max_length:
            default_attrs['maxlength'] = str(max_length)
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs)


class PhoneInput(DigitsInput):
    """
    Custom TextInput widget for 10 digit phone numbers.
    """
    input_type = 'tel'

    def __init__(self, attrs=None):
        super().__init__(attrs=attrs, max_length=10)


class ImageInput(forms.ClearableFileInput):
    """
    File input restricted to images.
    """

    def __init__(self, attrs=None):
        default_attrs = {'class': 'form-control', 'accept': 'image/*'}
        if attrs:
            default_attrs.update(attrs)
        super().__init__(attrs=default_attrs)
