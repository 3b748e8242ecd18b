"""
Shared fixtures: small UAT/production config pairs in several formats.
"""
import pytest


UAT_YAML = """database:
  host: uat-db
  port: 5432
  debug: true
"""

PROD_YAML = """database:
  host: prod-db
  port: 5432
"""

PROD_JSON = '{"database": {"host": "prod-db", "port": "5432"}}'


@pytest.fixture(name="uat_yaml")
def create_uat_yaml() -> str:
    return UAT_YAML


@pytest.fixture(name="prod_yaml")
def create_prod_yaml() -> str:
    return PROD_YAML


@pytest.fixture(name="prod_json")
def create_prod_json() -> str:
    return PROD_JSON


@pytest.fixture(name="config_pair")
def create_config_pair(tmp_path):
    """Write a UAT/prod pair to disk and return both paths."""
    source = tmp_path / "uat.yaml"
    target = tmp_path / "prod.json"
    source.write_text(UAT_YAML, encoding="utf-8")
    target.write_text(PROD_JSON, encoding="utf-8")
    return source, target
