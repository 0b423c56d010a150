import pytest

from stageup.config import (
    AvroSchemaLookupMode,
    Config,
    DestinationAvroSchemaSource,
    OriginAvroSchemaSource,
)


def test_config_equality():
    assert Config("conf.subject", "") == Config("conf.subject", "")
    assert Config("conf.subject", "") != Config("conf.subject", "orders")
    assert Config("conf.subject", "") != Config("other.subject", "")
    assert Config("conf.subject", "") != ("conf.subject", "")


def test_config_is_mutable_and_unhashable():
    config = Config("conf.schemaInMessage", True)
    config.value = False
    assert config.value is False
    with pytest.raises(TypeError):
        hash(config)


def test_config_repr():
    assert repr(Config("conf.schemaId", 0)) == "Config('conf.schemaId', 0)"


def test_enum_values():
    assert OriginAvroSchemaSource.SOURCE == "SOURCE"
    assert OriginAvroSchemaSource.INLINE.value == "INLINE"
    assert DestinationAvroSchemaSource.HEADER == "HEADER"
    assert DestinationAvroSchemaSource.INLINE == "INLINE"
    assert AvroSchemaLookupMode.AUTO == "AUTO"
    assert AvroSchemaLookupMode("SUBJECT") is AvroSchemaLookupMode.SUBJECT
