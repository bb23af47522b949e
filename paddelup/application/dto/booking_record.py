from __future__ import annotations

from pydantic import BaseModel, Field

from paddelup.domain.entities.booking_draft import BookingDraft


class BookingFieldsDTO(BaseModel):
    service: str
    price: int | float
    date: str
    time: str
    name: str
    email: str
    phone: str


class BookingRecordItemDTO(BaseModel):
    fields: BookingFieldsDTO


class BookingRecordDTO(BaseModel):
    records: list[BookingRecordItemDTO] = Field(min_length=1)

    @classmethod
    def from_draft(cls, draft: BookingDraft) -> "BookingRecordDTO":
        return cls(
            records=[
                BookingRecordItemDTO(
                    fields=BookingFieldsDTO(
                        service=draft.service,
                        price=draft.price,
                        date=draft.date,
                        time=draft.time,
                        name=draft.name,
                        email=draft.email,
                        phone=draft.phone,
                    )
                )
            ]
        )
