"""User-facing messages shared across parsers and commands.

Keeping the texts in one place keeps the test suite independent from the
wording used inside individual commands.
"""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_STUDENT_DISPLAYED_INDEX = "The student index provided is invalid"
MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX = "The teacher index provided is invalid"
MESSAGE_INVALID_MEETING_DISPLAYED_INDEX = "The meeting index provided is invalid"

MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_STUDENTS_LISTED_OVERVIEW = "{} students listed!"
MESSAGE_TEACHERS_LISTED_OVERVIEW = "{} teachers listed!"
MESSAGE_MEETINGS_LISTED_OVERVIEW = "{} meetings listed!"
