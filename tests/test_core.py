"""Tests for the Certiweb facade: validation, invocation semantics, event log."""

import contextlib
import json

import pytest

from certiweb import Certiweb, RecordAlreadyExistsError, RecordNotFoundError
from certiweb.clock import FixedClock, SystemClock
from certiweb.storage import InMemoryStore, SQLiteStore
from certiweb.types import Backup, Document, HistoryEntry, Report, Session, User

BASE_TIME = 1640995200


def read_events(data_dir):
    lines = []
    for path in sorted((data_dir / "logs").glob("registry-events-*.log")):
        lines.extend(path.read_text(encoding="utf-8").splitlines())
    return lines


class TestConstruction:
    def test_defaults_to_sqlite_in_data_dir(self, settings):
        registry = Certiweb(settings=settings)

        assert isinstance(registry.store, SQLiteStore)
        assert isinstance(registry.clock, SystemClock)
        assert registry.store.db_path == settings.data_dir / "test-registry.db"

    def test_registry_id_selects_database(self, settings):
        registry = Certiweb(registry_id="school", settings=settings)

        assert registry.registry_id == "school"
        assert registry.store.db_path == settings.data_dir / "school.db"

    def test_rejects_path_in_registry_id(self, settings):
        with pytest.raises(ValueError, match="path separators"):
            Certiweb(registry_id="../etc", settings=settings, store=InMemoryStore())

    def test_rejects_invalid_store(self, settings):
        with pytest.raises(TypeError, match="Invalid host store"):
            Certiweb(store=object(), settings=settings)

    def test_rejects_invalid_clock(self, settings, store):
        with pytest.raises(TypeError, match="Invalid clock"):
            Certiweb(store=store, clock=object(), settings=settings)

    def test_accepts_any_store_with_the_interface(self, settings):
        class DictHost:
            def __init__(self):
                self.reads = []

            def get(self, name):
                self.reads.append(name)
                return None

            def set(self, name, blob):
                pass

            def transaction(self):
                return contextlib.nullcontext()

        host = DictHost()
        registry = Certiweb(store=host, clock=FixedClock(1), settings=settings)

        assert registry.get_document(1) is None
        assert host.reads == ["documents"]


class TestValidation:
    @pytest.mark.parametrize("bad_id", ["1", 1.0, None, True, 2**31, -(2**31) - 1])
    def test_bad_ids_rejected(self, registry, store, bad_id):
        with pytest.raises(ValueError):
            registry.register_document(bad_id, "t", "s", 1)
        assert store.snapshot() == {}

    def test_id_range_limits_accepted(self, registry):
        registry.register_document(2**31 - 1, "max", "s", 1)
        registry.register_document(-(2**31), "min", "s", 1)

        assert registry.get_document(2**31 - 1).title == "max"
        assert registry.get_document(-(2**31)).title == "min"

    def test_negative_timestamp_rejected(self, registry):
        with pytest.raises(ValueError, match="created_at"):
            registry.register_document(1, "t", "s", -1)

    def test_non_string_text_rejected(self, registry):
        with pytest.raises(ValueError, match="title must be a string"):
            registry.register_document(1, 123, "s", 1)

    def test_text_length_limit(self, store, clock, settings):
        registry = Certiweb(
            store=store, clock=clock, settings=settings.model_copy(update={"max_text_length": 5})
        )
        registry.create_user(1, "12345", "r")

        with pytest.raises(ValueError, match="too long"):
            registry.create_user(2, "123456", "r")
        assert registry.get_user(2) is None

    def test_lookup_validates_id(self, registry):
        with pytest.raises(ValueError):
            registry.send_notification("1")


class TestDocumentScenario:
    def test_register_verify_update_backup(self, registry):
        registry.register_document(1, "Certificado de Estudios", "Pendiente", BASE_TIME)
        registry.verify_document(1, "Documento verificado")
        registry.update_document_status(1, "Validado")
        registry.register_backup(1, BASE_TIME, "/backup/cert_001.pdf", "Sistema")

        assert registry.get_document(1) == Document(
            "Certificado de Estudios", "Validado", BASE_TIME
        )
        assert registry.get_history(1) == HistoryEntry(BASE_TIME, "Documento verificado")
        assert registry.get_backup(1) == Backup(BASE_TIME, "/backup/cert_001.pdf", "Sistema")

    def test_five_documents(self, registry):
        for i in range(1, 6):
            registry.register_document(i, f"Documento {i}", "Activo", BASE_TIME + i)

        for i in range(1, 6):
            assert registry.get_document(i).created_at == BASE_TIME + i
        assert registry.get_document(99) is None
        assert registry.table_size("documents") == 5

    def test_duplicate_document(self, registry):
        registry.register_document(1, "A", "Pendiente", 1)
        with pytest.raises(RecordAlreadyExistsError, match="Document with the same ID"):
            registry.register_document(1, "B", "Pendiente", 2)

    def test_update_missing_document(self, registry):
        with pytest.raises(RecordNotFoundError, match="Document not found"):
            registry.update_document_status(1, "Validado")

    def test_verify_uses_current_clock(self, registry, clock):
        registry.verify_document(1, "Pendiente")
        clock.advance(60)
        registry.verify_document(1, "Aprobado")

        assert registry.get_history(1) == HistoryEntry(BASE_TIME + 60, "Aprobado")

    def test_append_history_then_duplicate(self, registry):
        registry.append_history(3, 10, "Aprobado")
        with pytest.raises(RecordAlreadyExistsError):
            registry.append_history(3, 20, "Rechazado")
        assert registry.get_history(3) == HistoryEntry(10, "Aprobado")

    def test_duplicate_backup(self, registry):
        registry.register_backup(1, 1, "/a", "Sistema")
        with pytest.raises(RecordAlreadyExistsError, match="Backup with that ID"):
            registry.register_backup(1, 2, "/b", "Sistema")


class TestAccounts:
    def test_user_lifecycle(self, registry):
        registry.create_user(1, "Juan Pérez", "Estudiante")
        registry.assign_role(1, "Administrador")

        assert registry.get_user(1) == User("Juan Pérez", "Administrador")

    def test_duplicate_user(self, registry):
        registry.create_user(1, "Juan", "Estudiante")
        with pytest.raises(RecordAlreadyExistsError, match="User already exists"):
            registry.create_user(1, "Juan", "Estudiante")

    def test_assign_role_missing_user(self, registry):
        with pytest.raises(RecordNotFoundError, match="User not found"):
            registry.assign_role(1, "Admin")

    def test_session_lifecycle(self, registry):
        registry.authenticate(1, "token")
        registry.assign_permissions(1, "read")

        assert registry.get_session(1) == Session("read")

    def test_permissions_missing_session(self, registry):
        with pytest.raises(RecordNotFoundError, match="Session not found"):
            registry.assign_permissions(1, "read")


class TestUpsertTables:
    def test_notification(self, registry):
        registry.configure_notification(1, "Email")
        registry.configure_notification(1, "SMS")
        assert registry.send_notification(1) == "SMS"

    def test_report(self, registry, clock):
        registry.generate_report(1, "PDF")
        assert registry.export_report(1) == Report(BASE_TIME, "PDF")

    def test_export(self, registry):
        registry.export_data(1, "JSON")
        assert registry.validate_export(1) == "JSON"

    def test_integration(self, registry):
        registry.sync_integration(1, "Moodle")
        assert registry.verify_integration(1) == "Moodle"

    def test_reads_on_empty_registry(self, registry, store):
        assert registry.get_document(1) is None
        assert registry.get_history(1) is None
        assert registry.get_backup(1) is None
        assert registry.get_user(1) is None
        assert registry.get_session(1) is None
        assert registry.send_notification(1) is None
        assert registry.export_report(1) is None
        assert registry.validate_export(1) is None
        assert registry.verify_integration(1) is None
        # Reads never create collections.
        assert store.snapshot() == {}


class TestTableSize:
    def test_counts_entries(self, registry):
        registry.create_user(1, "a", "r")
        registry.create_user(2, "b", "r")
        registry.authenticate(1, "t")

        assert registry.table_size("users") == 2
        assert registry.table_size("sessions") == 1
        assert registry.table_size("reports") == 0

    def test_unknown_table(self, registry):
        with pytest.raises(ValueError, match="Unknown table"):
            registry.table_size("grades")


class TestAllOrNothing:
    """A failed invocation leaves every collection as it was."""

    def _seeded(self, failing, clock, settings):
        registry = Certiweb(store=failing, clock=clock, settings=settings)
        registry.register_document(1, "A", "Pendiente", 1)
        registry.create_user(1, "Juan", "Estudiante")
        failing.fail_writes = True
        return registry

    def test_in_memory_failed_write_discarded(self, failing_store, clock, settings):
        registry = self._seeded(failing_store, clock, settings)
        before = failing_store.snapshot()

        with pytest.raises(OSError, match="host write failed"):
            registry.register_document(2, "B", "Pendiente", 2)
        with pytest.raises(OSError):
            registry.assign_role(1, "Admin")

        assert failing_store.snapshot() == before
        assert registry.get_document(2) is None
        assert registry.get_user(1).role == "Estudiante"

    def test_sqlite_failed_write_discarded(self, failing_sqlite_store, clock, settings):
        registry = self._seeded(failing_sqlite_store, clock, settings)
        before = failing_sqlite_store.get("documents")

        with pytest.raises(OSError):
            registry.update_document_status(1, "Validado")

        assert failing_sqlite_store.get("documents") == before
        assert registry.get_document(1).status == "Pendiente"

    def test_rejection_writes_nothing(self, registry, store):
        registry.register_document(1, "A", "Pendiente", 1)
        before = store.snapshot()

        with pytest.raises(RecordAlreadyExistsError):
            registry.register_document(1, "B", "Validado", 2)
        with pytest.raises(RecordNotFoundError):
            registry.assign_permissions(5, "admin")

        assert store.snapshot() == before

    def test_failed_write_is_not_logged_as_write(self, failing_store, clock, settings):
        registry = self._seeded(failing_store, clock, settings)
        with pytest.raises(OSError):
            registry.export_data(1, "JSON")

        events = read_events(settings.data_dir)
        assert not any("op=export_data" in line for line in events)


class TestRegistryEvents:
    def test_writes_are_logged(self, registry, settings):
        registry.register_document(7, "A", "Pendiente", 1)
        registry.configure_notification(3, "Email")

        events = read_events(settings.data_dir)
        assert len(events) == 2
        assert events[0].endswith(
            "| write | registry=test-registry | table=documents, id=7, op=register_document"
        )
        assert "table=notifications, id=3, op=configure_notification" in events[1]

    def test_rejections_are_logged(self, registry, settings):
        with pytest.raises(RecordNotFoundError):
            registry.assign_role(4, "Admin")

        events = read_events(settings.data_dir)
        assert len(events) == 1
        assert "| rejected | registry=test-registry |" in events[0]
        assert "table=users, id=4, reason=RecordNotFoundError" in events[0]

    def test_events_follow_configured_data_dir(self, store, clock, settings, tmp_path):
        explicit = tmp_path / "explicit"
        registry = Certiweb(
            store=store, clock=clock, settings=settings.model_copy(update={"data_dir": explicit})
        )

        registry.register_document(1, "A", "Pendiente", 1)
        with pytest.raises(RecordAlreadyExistsError):
            registry.register_document(1, "B", "Pendiente", 2)

        events = read_events(explicit)
        assert len(events) == 2
        assert "op=register_document" in events[0]
        assert "reason=RecordAlreadyExistsError" in events[1]
        # Nothing lands in the CERTIWEB_DATA_DIR home.
        assert read_events(settings.data_dir) == []

    def test_reads_are_not_logged(self, registry, settings):
        registry.get_document(1)
        registry.validate_export(1)
        assert read_events(settings.data_dir) == []

    def test_credentials_never_reach_event_log(self, registry, settings):
        registry.authenticate(1, "hunter2")
        assert "hunter2" not in "\n".join(read_events(settings.data_dir))


class TestPersistence:
    def test_survives_new_instance(self, sqlite_store, clock, settings):
        Certiweb(store=sqlite_store, clock=clock, settings=settings).register_document(
            1, "Certificado de Graduación", "Emitido", BASE_TIME
        )

        reopened = Certiweb(store=SQLiteStore(sqlite_store.db_path), clock=clock, settings=settings)
        assert reopened.get_document(1).title == "Certificado de Graduación"

    def test_one_blob_per_table(self, sqlite_registry, sqlite_store):
        sqlite_registry.create_user(1, "a", "r")
        sqlite_registry.create_user(2, "b", "r")
        sqlite_registry.sync_integration(1, "Moodle")

        assert sqlite_store.names() == ["integrations", "users"]
        assert json.loads(sqlite_store.get("users")) == {
            "1": {"name": "a", "role": "r"},
            "2": {"name": "b", "role": "r"},
        }
