"""Request bodies for signup and booth manager routes."""
from pydantic import BaseModel, field_validator


class SignupRequest(BaseModel):
    name: str = ""
    student_id: str = ""
    rfid_card_number: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""

    @field_validator("student_id", "rfid_card_number", "phone", mode="before")
    @classmethod
    def digits_as_text(cls, v):
        # Some clients send digit fields as JSON numbers.
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v


class BoothManagerLogin(BaseModel):
    email: str
    password: str


class PaperCountUpdate(BaseModel):
    loaded_paper: int
    operation: str = "set"
