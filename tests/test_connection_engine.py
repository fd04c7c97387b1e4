import pytest
from sqlalchemy import text
from sqlalchemy.exc import TimeoutError as SATimeoutError

from backend.database.config import connection_engine
from backend.database.config.connection_engine import (
    build_connection_url,
    connect,
    create_connection_engine,
    verify_connection,
)
from backend.database.config.errors import ConfigurationError, DatabaseConnectionError


def test_mysql_url_is_built_from_settings(make_settings):
    settings = make_settings(
        DB_DRIVER_NAME="mysql+pymysql",
        DB_HOST="db.internal",
        DB_PORT=3306,
        DB_USERNAME="root",
        DB_PASSWORD="p@ss:word",
        DB_DATABASE_NAME="ecommerce_db",
    )

    url = build_connection_url(settings)

    assert url.drivername == "mysql+pymysql"
    assert url.host == "db.internal"
    assert url.port == 3306
    assert url.username == "root"
    assert url.password == "p@ss:word"
    assert url.database == "ecommerce_db"
    assert "p@ss:word" not in url.render_as_string(hide_password=True)


def test_sqlite_url_omits_empty_credentials(settings):
    url = build_connection_url(settings)

    assert url.host is None
    assert url.username is None
    assert url.password is None
    assert url.database == settings.DB_DATABASE_NAME


def test_network_engine_gets_pool_options(make_settings):
    settings = make_settings(
        DB_DRIVER_NAME="mysql+pymysql",
        DB_HOST="db.internal",
        DB_USERNAME="root",
        DB_PASSWORD="root",
        DB_DATABASE_NAME="ecommerce_db",
        DB_POOL_SIZE=3,
    )

    engine = create_connection_engine(settings)
    try:
        assert engine.pool.size() == 3
        assert engine.dialect.name == "mysql"
    finally:
        engine.dispose()


def test_unknown_driver_is_a_configuration_error(make_settings):
    with pytest.raises(ConfigurationError) as excinfo:
        create_connection_engine(make_settings(DB_DRIVER_NAME="nosuchdb"))

    assert excinfo.value.fields == ["DB_DRIVER_NAME"]


def test_connect_returns_verified_engine(settings):
    engine = connect(settings)
    try:
        with engine.connect() as connection:
            assert connection.execute(text("SELECT 1")).scalar() == 1
    finally:
        engine.dispose()


def test_failed_connection_raises_typed_error(make_settings, tmp_path):
    missing = tmp_path / "missing" / "shop.db"
    settings = make_settings(DB_DATABASE_NAME=str(missing))

    with pytest.raises(DatabaseConnectionError) as excinfo:
        connect(settings)

    assert str(missing) in excinfo.value.url
    assert str(excinfo.value).startswith("Connection error:")
    assert excinfo.value.__cause__ is not None


def test_verify_connection_logs_failure(make_settings, tmp_path, caplog):
    settings = make_settings(DB_DATABASE_NAME=str(tmp_path / "missing" / "shop.db"))
    engine = create_connection_engine(settings)

    with caplog.at_level("ERROR"), pytest.raises(DatabaseConnectionError):
        verify_connection(engine)

    assert any("Connection error" in record.getMessage() for record in caplog.records)
    engine.dispose()


def test_password_never_leaks_on_failed_connection(make_settings, caplog):
    settings = make_settings(
        DB_DRIVER_NAME="mysql+pymysql",
        DB_HOST="127.0.0.1",
        DB_PORT=1,
        DB_CONNECT_TIMEOUT=1,
        DB_USERNAME="root",
        DB_PASSWORD="hunter2",
        DB_DATABASE_NAME="ecommerce_db",
    )

    with caplog.at_level("DEBUG"), pytest.raises(DatabaseConnectionError) as excinfo:
        connect(settings)

    assert "hunter2" not in str(excinfo.value)
    assert "hunter2" not in excinfo.value.url
    assert "***" in excinfo.value.url
    assert caplog.records
    assert all("hunter2" not in record.getMessage() for record in caplog.records)


def test_connect_disposes_engine_when_verification_fails(make_settings, tmp_path, monkeypatch):
    settings = make_settings(DB_DATABASE_NAME=str(tmp_path / "missing" / "shop.db"))
    engine = create_connection_engine(settings)
    disposed = []
    monkeypatch.setattr(engine, "dispose", lambda: disposed.append(True))
    monkeypatch.setattr(connection_engine, "create_connection_engine", lambda _settings: engine)

    with pytest.raises(DatabaseConnectionError):
        connect(settings)

    assert disposed == [True]


def test_connect_disposes_engine_on_unexpected_error(settings, monkeypatch):
    engine = create_connection_engine(settings)
    disposed = []
    monkeypatch.setattr(engine, "dispose", lambda: disposed.append(True))
    monkeypatch.setattr(connection_engine, "create_connection_engine", lambda _settings: engine)

    def broken_verify(_engine):
        raise RuntimeError("driver exploded")

    monkeypatch.setattr(connection_engine, "verify_connection", broken_verify)

    with pytest.raises(RuntimeError, match="driver exploded"):
        connect(settings)

    assert disposed == [True]


def test_pool_timeout_is_a_connection_error(settings, monkeypatch):
    engine = create_connection_engine(settings)

    def exhausted_pool():
        raise SATimeoutError("QueuePool limit of size 5 overflow 10 reached")

    monkeypatch.setattr(engine, "connect", exhausted_pool)

    with pytest.raises(DatabaseConnectionError, match="QueuePool limit"):
        verify_connection(engine)

    engine.dispose()
