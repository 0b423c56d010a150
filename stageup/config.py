"""Config entry type and the enumerations selected by the upgraders.

A stage's configuration is an ordered list of ``Config`` entries. Entry names are
dot-delimited paths: the last segment is the field name and everything before it
identifies the config bean the field belongs to, e.g. ``conf.dataFormatConfig.avroSchema``.
"""

from enum import Enum


class Config:
    """A single named configuration value."""

    __slots__ = ("name", "value")

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __eq__(self, other):
        """Entries are equal when both name and value match."""
        if not isinstance(other, Config):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    __hash__ = None

    def __repr__(self):
        return f"Config({self.name!r}, {self.value!r})"


class OriginAvroSchemaSource(str, Enum):
    """Where an origin (parser) finds the Avro schema."""

    SOURCE = "SOURCE"
    INLINE = "INLINE"
    REGISTRY = "REGISTRY"


class DestinationAvroSchemaSource(str, Enum):
    """Where a destination (generator) takes the Avro schema from."""

    HEADER = "HEADER"
    INLINE = "INLINE"
    REGISTRY = "REGISTRY"


class AvroSchemaLookupMode(str, Enum):
    """How a schema is looked up in the schema registry."""

    SUBJECT = "SUBJECT"
    ID = "ID"
    AUTO = "AUTO"
