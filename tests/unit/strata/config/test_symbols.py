"""Unit tests for SymbolResolver."""
import logging
import os.path
import sys

import pytest

from src.strata.exceptions import (
    InvalidReferenceError,
    ModuleLoadError,
    ReferenceResolutionError,
    UnboundReferenceError,
)
from src.strata.utils.config.documents import SymbolRef
from src.strata.utils.config.symbols import (
    ImportlibModuleLoader,
    StaticModuleLoader,
    SymbolResolver,
)

LAZY_MODULE = "tests.fixtures.lazy_values"


def test_resolve_already_loaded_module():
    """Should resolve a reference into a module that is already imported."""
    resolver = SymbolResolver()

    assert resolver.resolve("os.path:join") is os.path.join
    assert resolver.resolve(SymbolRef("os.path:join")) is os.path.join


def test_resolve_rejects_unqualified_name():
    """Should fail with InvalidReferenceError for a name without a module."""
    with pytest.raises(InvalidReferenceError, match="namespaced"):
        SymbolResolver().resolve("invalid")


def test_resolve_loads_module_on_demand(monkeypatch):
    """Should import the owning module when it is not loaded yet."""
    monkeypatch.delitem(sys.modules, LAZY_MODULE, raising=False)
    resolver = SymbolResolver()

    handler = resolver.resolve(f"{LAZY_MODULE}:handler")

    assert LAZY_MODULE in sys.modules
    assert handler("req") == {"handled": "req"}
    assert resolver.resolve(f"{LAZY_MODULE}:RETRY_LIMIT") == 5


def test_resolve_dotted_attribute():
    """Should walk dotted names after the separator."""
    assert SymbolResolver().resolve(f"{LAZY_MODULE}:Settings.timeout") == 30


def test_resolve_fails_when_module_cannot_load():
    """Should fail with ModuleLoadError carrying the module name."""
    with pytest.raises(ModuleLoadError) as exc_info:
        SymbolResolver().resolve("srsly.not_a_module:var")

    error = exc_info.value
    assert error.module == "srsly.not_a_module"
    assert error.reference == "srsly.not_a_module:var"
    assert isinstance(error.__cause__, ImportError)


def test_resolve_fails_when_name_unbound_after_load():
    """Should fail with UnboundReferenceError if the module lacks the name."""
    with pytest.raises(UnboundReferenceError) as exc_info:
        SymbolResolver().resolve(f"{LAZY_MODULE}:invalid")

    assert exc_info.value.reference == f"{LAZY_MODULE}:invalid"


def test_two_phase_lookup_with_static_loader():
    """Should look up first and load only when the name is missing."""
    loaded = {"stahp": "found"}

    class LateLoader(StaticModuleLoader):
        def load(self, module):
            self.load_calls.append(module)
            self.registry[module] = loaded
            return loaded

    late = LateLoader()
    resolver = SymbolResolver(module_loader=late)

    assert resolver.resolve("fixtures.dont_load_me:stahp") == "found"
    assert late.load_calls == ["fixtures.dont_load_me"]

    # Second resolution finds it without loading again
    assert resolver.resolve("fixtures.dont_load_me:stahp") == "found"
    assert late.load_calls == ["fixtures.dont_load_me"]


def test_static_loader_does_not_load_when_bound():
    """Should not call load when lookup already finds the name."""
    loader = StaticModuleLoader({"app": {"value": 1}})

    assert SymbolResolver(module_loader=loader).resolve("app:value") == 1
    assert loader.load_calls == []


def test_static_loader_unknown_module():
    """Should report a registry miss as ModuleLoadError."""
    with pytest.raises(ModuleLoadError):
        SymbolResolver(module_loader=StaticModuleLoader()).resolve("missing:name")


def test_importlib_loader_wraps_errors_raised_by_module(tmp_path, monkeypatch):
    """Should report exceptions raised at import time as ImportError."""
    (tmp_path / "strata_exploding_module.py").write_text("raise RuntimeError('boom')\n")
    monkeypatch.syspath_prepend(str(tmp_path))

    with pytest.raises(ImportError, match="boom"):
        ImportlibModuleLoader().load("strata_exploding_module")


def test_resolve_all_preserves_shape():
    """Should resolve references inside dicts, lists and sets."""
    loader = StaticModuleLoader({"app": {"symbol": "resolved"}})
    doc = {
        "a": {"b": {"c": SymbolRef("app:symbol")}},
        "v": [0, "d"],
        "s": {SymbolRef("app:symbol")},
    }

    assert SymbolResolver(module_loader=loader).resolve_all(doc) == {
        "a": {"b": {"c": "resolved"}},
        "v": [0, "d"],
        "s": {"resolved"},
    }


def test_on_demand_load_logs_at_debug(monkeypatch, caplog):
    """Should log the on-demand load with DEBUG records enabled."""
    caplog.set_level(logging.DEBUG, logger="src.strata.utils.config.symbols")
    monkeypatch.delitem(sys.modules, LAZY_MODULE, raising=False)

    assert SymbolResolver().resolve(f"{LAZY_MODULE}:RETRY_LIMIT") == 5

    records = [r for r in caplog.records if r.getMessage().startswith("Loading module")]
    assert records
    assert records[0].module_name == LAZY_MODULE


def test_load_failure_logs_at_debug(caplog):
    """Should raise ModuleLoadError, not a logging error, with DEBUG records enabled."""
    caplog.set_level(logging.DEBUG, logger="src.strata.utils.config.symbols")

    with pytest.raises(ModuleLoadError):
        SymbolResolver().resolve("srsly.not_a_module:var")

    failed = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert failed[0].module_name == "srsly.not_a_module"
    assert failed[0].reference == "srsly.not_a_module:var"


def test_resolve_all_rejects_unhashable_set_member():
    """Should raise ReferenceResolutionError when a set member resolves to a dict."""
    loader = StaticModuleLoader({"app": {"table": {"a": 1}}})

    with pytest.raises(ReferenceResolutionError, match="unhashable") as exc_info:
        SymbolResolver(module_loader=loader).resolve_all({"s": {SymbolRef("app:table")}})

    assert exc_info.value.error_code == "REFERENCE_ERROR"
