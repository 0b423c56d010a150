"""Data format upgrades adding Avro schema registry support.

These are shared by individual stage upgraders until config beans can be upgraded as a
whole. Each upgrader modifies the list of config entries in place and returns it.

Upgraders are meant to run once per stage. Running one again on its own output appends
a second set of the new entries, since the anchor entry is still there.
"""

from logzero import logger

from stageup import exceptions
from stageup.config import (
    AvroSchemaLookupMode,
    Config,
    DestinationAvroSchemaSource,
    OriginAvroSchemaSource,
)
from stageup.helpers import find_by_name, join_name, name_prefix

AVRO_SCHEMA = "avroSchema"


def _bean_prefix(configs):
    """Find the prefix of the config bean that owns the avroSchema entry."""
    if (avro_schema := find_by_name(configs, AVRO_SCHEMA)) is None:
        raise exceptions.UpgradeNotApplicableError(AVRO_SCHEMA)
    return name_prefix(avro_schema.name)


def _legacy_flag(configs, name):
    """Find a legacy boolean entry, making sure it actually holds a bool."""
    config = find_by_name(configs, name)
    if config is not None and not isinstance(config.value, bool):
        raise exceptions.UpgradeTypeError(config)
    return config


def _apply(configs, to_remove, to_add):
    """Remove, then append, the staged entries."""
    for config in to_remove:
        logger.debug(f"Removing {config.name}.")
    configs[:] = [config for config in configs if not any(config is rm for rm in to_remove)]
    for config in to_add:
        logger.debug(f"Adding {config.name} = {config.value!r}.")
    configs.extend(to_add)
    return configs


def upgrade_avro_parser_with_schema_registry_support(configs):
    """Replace schemaInMessage with avroSchemaSource and add schema registry configs."""
    prefix = _bean_prefix(configs)
    # schemaInMessage was removed and superseded by OriginAvroSchemaSource.SOURCE
    schema_in_message = _legacy_flag(configs, "schemaInMessage")
    logger.info(f"Upgrading Avro parser config '{prefix}' with schema registry support.")
    to_remove, to_add = [], []

    # Upgraded stages keep the choice made in the past, while a new stage forces the
    # user to pick where the schema comes from.
    if schema_in_message is not None:
        if schema_in_message.value:
            source = OriginAvroSchemaSource.SOURCE
        else:
            source = OriginAvroSchemaSource.INLINE
        to_remove.append(schema_in_message)
    else:
        source = OriginAvroSchemaSource.SOURCE
    to_add.append(Config(join_name(prefix, "avroSchemaSource"), source))

    # New configs added
    to_add.extend(
        [
            Config(join_name(prefix, "schemaRegistryUrls"), []),
            Config(join_name(prefix, "schemaLookupMode"), AvroSchemaLookupMode.AUTO),
            Config(join_name(prefix, "subject"), ""),
            Config(join_name(prefix, "schemaId"), 0),
        ]
    )
    return _apply(configs, to_remove, to_add)


def upgrade_avro_generator_with_schema_registry_support(configs):
    """Replace avroSchemaInHeader with avroSchemaSource and add schema registry configs."""
    prefix = _bean_prefix(configs)
    # avroSchemaInHeader was removed and superseded by DestinationAvroSchemaSource.HEADER
    avro_schema_in_header = _legacy_flag(configs, "avroSchemaInHeader")
    logger.info(f"Upgrading Avro generator config '{prefix}' with schema registry support.")
    to_remove, to_add = [], []

    if avro_schema_in_header is not None:
        if avro_schema_in_header.value:
            source = DestinationAvroSchemaSource.HEADER
        else:
            source = DestinationAvroSchemaSource.INLINE
        to_remove.append(avro_schema_in_header)
    else:
        source = DestinationAvroSchemaSource.INLINE
    to_add.append(Config(join_name(prefix, "avroSchemaSource"), source))

    to_add.extend(
        [
            Config(join_name(prefix, "registerSchema"), False),
            Config(join_name(prefix, "schemaRegistryUrlsForRegistration"), []),
            Config(join_name(prefix, "schemaRegistryUrls"), []),
            Config(join_name(prefix, "schemaLookupMode"), AvroSchemaLookupMode.AUTO),
            Config(join_name(prefix, "subject"), ""),
            Config(join_name(prefix, "subjectToRegister"), ""),
            Config(join_name(prefix, "schemaId"), 0),
        ]
    )
    return _apply(configs, to_remove, to_add)
