import attrs

from src.platform.exception.exceptions import ValidationError


@attrs.frozen
class PurchaserInfo:
    """Contact details of the buyer; the ticket email goes to `email`"""

    name: str
    email: str
    phone: str

    @classmethod
    def create(cls, *, name: str | None, email: str | None, phone: str | None) -> 'PurchaserInfo':
        values = {'name': name, 'email': email, 'phone': phone}
        for field, value in values.items():
            if value is None or not str(value).strip():
                raise ValidationError(f'{field} is required', field=field)

        email_value = str(email).strip()
        if '@' not in email_value:
            raise ValidationError('email is not a valid address', field='email')

        return cls(name=str(name).strip(), email=email_value, phone=str(phone).strip())
