"""Sample entries used to seed an empty address book."""

from __future__ import annotations

from src.addressbook.domain.address_book import AddressBook
from src.addressbook.domain.fields import (
    Address,
    Description,
    Email,
    FormClass,
    Gender,
    Involvement,
    Location,
    MedicalHistory,
    MeetingDateTime,
    Name,
    Phone,
    Tag,
)
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person, Student, Teacher


def _tags(*names: str) -> frozenset[Tag]:
    return frozenset(Tag(name) for name in names)


def get_sample_persons() -> list[Person]:
    return [
        Student(
            name=Name("Alex Yeoh"),
            phone=Phone("87438807"),
            email=Email("alexyeoh@example.com"),
            address=Address("Blk 30 Geylang Street 29, #06-40"),
            gender=Gender("M"),
            involvement=Involvement("Football"),
            tags=_tags("prefect"),
            emergency_contact=Phone("91031282"),
            form_class=FormClass("3A"),
            medical_history=MedicalHistory("Asthma"),
        ),
        Student(
            name=Name("Bernice Yu"),
            phone=Phone("99272758"),
            email=Email("berniceyu@example.com"),
            address=Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18"),
            gender=Gender("F"),
            involvement=Involvement("Choir"),
            tags=_tags("classChair"),
            emergency_contact=Phone("92492021"),
            form_class=FormClass("3A"),
        ),
        Student(
            name=Name("Irfan Ibrahim"),
            phone=Phone("92492021"),
            email=Email("irfan@example.com"),
            address=Address("Blk 47 Tampines Street 20, #17-35"),
            gender=Gender("M"),
            involvement=Involvement("Robotics"),
            emergency_contact=Phone("87438807"),
            form_class=FormClass("4B"),
        ),
        Teacher(
            name=Name("Charlotte Oliveiro"),
            phone=Phone("93210283"),
            email=Email("charlotte@example.com"),
            address=Address("Blk 11 Ang Mo Kio Street 74, #11-04"),
            gender=Gender("F"),
            involvement=Involvement("Mathematics"),
            tags=_tags("formTeacher"),
        ),
        Teacher(
            name=Name("David Li"),
            phone=Phone("91031282"),
            email=Email("lidavid@example.com"),
            address=Address("Blk 436 Serangoon Gardens Street 26, #16-43"),
            gender=Gender("M"),
            involvement=Involvement("Physical Education"),
        ),
    ]


def get_sample_address_book() -> AddressBook:
    """Build an address book holding the sample persons and one meeting."""
    sample = AddressBook()
    persons = get_sample_persons()
    for person in persons:
        sample.add_person(person)

    sample.add_meeting(
        Meeting(
            description=Description("Parent teacher meeting"),
            date_time=MeetingDateTime("2026-11-02 15:30"),
            location=Location("Staff room"),
            attendees=(persons[0], persons[3]),
        )
    )
    return sample
