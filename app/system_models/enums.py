# app/system_models/enums.py
import enum
from typing import Type


class Gender(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


def sql_in_list(column: str, choices: Type[enum.Enum]) -> str:
    """Render a CHECK expression restricting `column` to the enum's values."""
    values = ", ".join(f"'{member.value}'" for member in choices)
    return f"{column} IN ({values})"
