import pytest

from stageup import settings
from stageup.config import Config

AVRO_SCHEMA = '{"type": "record", "name": "Order", "fields": []}'


@pytest.fixture
def stageup_settings(tmp_path):
    """Create a settings object that ignores any settings file in the user's directory"""
    return settings.create_settings(config_file=tmp_path / "stageup_settings.yaml")


@pytest.fixture
def set_envars(monkeypatch, request):
    """Set environment variables for a test and clean up afterward"""
    for envar, value in request.param:
        monkeypatch.setenv(envar, value)
    yield


@pytest.fixture
def parser_configs():
    """Configs of an origin stage from before schema registry support."""
    return [
        Config("conf.dataFormat", "AVRO"),
        Config("conf.dataFormatConfig.avroSchema", AVRO_SCHEMA),
        Config("conf.dataFormatConfig.schemaInMessage", True),
        Config("conf.dataFormatConfig.charset", "UTF-8"),
    ]


@pytest.fixture
def generator_configs():
    """Configs of a destination stage from before schema registry support."""
    return [
        Config("conf.dataFormat", "AVRO"),
        Config("conf.dataGeneratorFormatConfig.avroSchema", AVRO_SCHEMA),
        Config("conf.dataGeneratorFormatConfig.avroSchemaInHeader", True),
        Config("conf.dataGeneratorFormatConfig.avroCompression", "NULL"),
    ]
