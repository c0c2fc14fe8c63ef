import copy
import json
import os
import tempfile
import threading

_DATA_DIR = os.environ.get(
    "SALES_DATA_DIR",
    os.path.join(os.path.dirname(os.path.dirname(__file__)), "data"),
)
_FILE_LOCK = threading.Lock()

DEFAULTS = {
    "sales.json": [],
    "config.json": {
        "server": {
            "host": "0.0.0.0",
            "port": 3000,
            "debug": False
        },
        "mcp": {
            "host": "0.0.0.0",
            "port": 8000,
            "path": "/mcp"
        },
        "log_level": "INFO",
        "sales_file": "sales.json",
        "results_file": "results.json"
    }
}

def data_path(filename: str) -> str:
    os.makedirs(_DATA_DIR, exist_ok=True)
    return os.path.join(_DATA_DIR, filename)

def _atomic_write(path: str, data_obj):
    tmp_fd, tmp_path = tempfile.mkstemp(prefix=".tmp_", dir=os.path.dirname(path))
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            json.dump(data_obj, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    finally:
        try:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        except OSError:
            pass

def ensure_defaults():
    os.makedirs(_DATA_DIR, exist_ok=True)
    for fname, default in DEFAULTS.items():
        path = data_path(fname)
        if not os.path.exists(path):
            with _FILE_LOCK:
                _atomic_write(path, default)

def read_json(filename: str):
    path = data_path(filename)
    with _FILE_LOCK:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

def write_json(filename: str, obj):
    path = data_path(filename)
    with _FILE_LOCK:
        _atomic_write(path, obj)

def read_config() -> dict:
    """Return config.json merged over the defaults; a missing or broken file yields the defaults."""
    cfg = copy.deepcopy(DEFAULTS["config.json"])
    try:
        stored = read_json("config.json")
    except (OSError, ValueError, RecursionError):
        return cfg
    if not isinstance(stored, dict):
        return cfg
    for k, v in stored.items():
        if isinstance(v, dict) and isinstance(cfg.get(k), dict):
            cfg[k].update(v)
        else:
            cfg[k] = v
    return cfg

def sales_file() -> str:
    name = read_config().get("sales_file")
    return name if isinstance(name, str) and name else "sales.json"
