"""Gender value object."""

from enum import Enum


class Gender(str, Enum):
    """Optional gender attribute of a directory user.

    A user without a gender stores None rather than a member of this enum.
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
