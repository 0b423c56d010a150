"""Config entry upgraders shared between stage upgraders."""

from stageup.upgraders.data_format import (
    upgrade_avro_generator_with_schema_registry_support,
    upgrade_avro_parser_with_schema_registry_support,
)

UPGRADERS = {
    "avro_parser": upgrade_avro_parser_with_schema_registry_support,
    "avro_generator": upgrade_avro_generator_with_schema_registry_support,
}

__all__ = [
    "UPGRADERS",
    "upgrade_avro_generator_with_schema_registry_support",
    "upgrade_avro_parser_with_schema_registry_support",
]
