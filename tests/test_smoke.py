from fastapi.testclient import TestClient
from lexiclean.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_normalize_path_string():
    r = client.post("/normalize", json={"path": "/foo/../bar/./baz/.."})
    assert r.status_code == 200

    data = r.json()
    assert data["path"] == "/bar"
    assert data["components"] == [
        {"kind": "root_dir"},
        {"kind": "normal", "name": "bar"},
    ]
    summary = data["report"]["summary"]
    assert summary["normals_cancelled"] == 2
    assert summary["lexical"] is True
    assert data["report"]["flavor"] == "posix"

def test_normalize_components():
    payload = {
        "components": [
            {"kind": "normal", "name": "a"},
            {"kind": "parent_dir"},
        ]
    }
    r = client.post("/normalize", json=payload)
    assert r.status_code == 200

    data = r.json()
    assert data["path"] == "."
    assert data["components"] == [{"kind": "cur_dir"}]
    assert data["report"]["summary"]["empty_policy_applied"] is True

def test_normalize_empty_policy_override():
    r = client.post("/normalize", json={"path": "foo/..", "empty_policy": "empty"})
    assert r.status_code == 200
    assert r.json()["path"] == ""
    assert r.json()["components"] == []

def test_normalize_windows_flavor():
    r = client.post("/normalize", json={"path": "C:\\..\\Users\\me\\..", "flavor": "windows"})
    assert r.status_code == 200
    assert r.json()["path"] == "C:\\Users"

def test_normalize_requires_exactly_one_input():
    r = client.post("/normalize", json={})
    assert r.status_code == 422

    r = client.post("/normalize", json={"path": "a", "components": []})
    assert r.status_code == 422

def test_normalize_rejects_unknown_component_kind():
    r = client.post("/normalize", json={"components": [{"kind": "symlink", "name": "x"}]})
    assert r.status_code == 422

def test_normalize_rejects_empty_segment_name():
    r = client.post("/normalize", json={"components": [{"kind": "normal", "name": ""}]})
    assert r.status_code == 422

def test_normalize_rejects_non_segment_names():
    for name in ("..", "a/b"):
        r = client.post("/normalize", json={"components": [{"kind": "normal", "name": name}]})
        assert r.status_code == 422
