"""Core constants: field limits shared by validation and the ORM schema.

Single source of truth so the column sizes and the validation messages
cannot drift apart.
"""

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000
