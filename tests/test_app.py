from ark_smart_breeding.app import FileService, create_file_service
from ark_smart_breeding.config import DEFAULT_LAYOUT
from ark_smart_breeding.models import LoadStatus


def make_service(tmp_path, installed=False):
    return FileService(
        installed=installed,
        exe_path=tmp_path / "portable" / "ARK Smart Breeding.exe",
        app_data_root=tmp_path / "local",
    )


def test_portable_and_installed_bases(tmp_path):
    assert make_service(tmp_path).resolve_base_path() == tmp_path / "portable"
    assert make_service(tmp_path, True).resolve_base_path() == (
        tmp_path / "local" / "ARK Smart Breeding"
    )


def test_installed_flag_can_be_callable(tmp_path):
    state = {"installed": False}
    service = make_service(tmp_path, lambda: state["installed"])
    assert service.resolve_base_path() == tmp_path / "portable"
    state["installed"] = True
    assert service.resolve_base_path() == tmp_path / "local" / "ARK Smart Breeding"


def test_named_paths(tmp_path):
    service = make_service(tmp_path)
    data = tmp_path / "portable" / "data"
    assert service.resolve_data_path() == data
    assert service.resolve_data_path(DEFAULT_LAYOUT.kibbles) == data / "kibbles.json"
    assert service.mod_manifest_path() == data / "values" / "_manifest.json"
    assert service.resolve_path("settings.json") == tmp_path / "portable" / "settings.json"


def test_values_round_trip_then_delete(tmp_path):
    service = make_service(tmp_path, True)
    assert service.ensure_data_directory().ok

    path = service.resolve_data_path(DEFAULT_LAYOUT.values)
    assert service.save_json(path, {"version": 3}).ok
    assert service.looks_like_json_object(path)

    value, outcome = service.load_json(path)
    assert outcome.ok
    assert value["version"] == 3

    assert service.try_delete(path)
    assert service.load_json(path).status is LoadStatus.NOT_FOUND


def test_move_and_reader(tmp_path):
    service = make_service(tmp_path)
    service.ensure_directory(service.resolve_data_path())
    tmp_file = service.resolve_data_path("aliases.json.tmp")
    service.save_json(tmp_file, {"Rex": "T-Rex"})

    assert service.try_move(tmp_file, service.resolve_data_path(DEFAULT_LAYOUT.aliases))
    with service.open_json_reader(DEFAULT_LAYOUT.aliases) as f:
        assert "T-Rex" in f.read()
    with service.open_json_stream(DEFAULT_LAYOUT.aliases) as f:
        assert b"Rex" in f.read()


def test_probe_through_service(tmp_path):
    service = make_service(tmp_path)
    assert service.probe_write_privilege(tmp_path) is False


def test_create_file_service_portable():
    service = create_file_service()
    assert service.installed is False
    assert service.resolve_base_path() == service.exe_path.parent
