import json
import logging
import time

from signalwire_skill import metrics
from signalwire_skill.logging import configure_logging
from signalwire_skill.metrics import Counter, Timer


def test_json_logging_structure(monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_logging("INFO")
    logging.getLogger(__name__).info(
        "sample",
        extra={
            "event_type": "document_lookup",
            "document": "reference/agent-base",
            "category": "reference",
            "confidence": 1.0,
            "matched_terms": ["AgentBase"],
        },
    )
    captured = capsys.readouterr().err.strip().splitlines()[-1]
    data = json.loads(captured)
    assert data["event_type"] == "document_lookup"
    assert data["document"] == "reference/agent-base"
    assert data["matched_terms"] == ["AgentBase"]
    for key in ["category", "confidence", "error_category", "duration_ms"]:
        assert key in data


def test_plain_logging_is_default(monkeypatch, capsys):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    configure_logging("INFO")
    logging.getLogger(__name__).info("hello")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    assert line.endswith("hello")
    assert "INFO" in line


def test_counter_and_timer_update():
    counter = Counter()
    counter.inc()
    counter.inc(2)
    assert counter.value == 3
    counter.reset()
    assert counter.value == 0

    timer = Timer()
    assert timer.stop() is None
    with timer.time():
        time.sleep(0.001)
    assert timer.last_ms is not None and timer.last_ms > 0


def test_snapshot_lists_every_metric():
    assert set(metrics.snapshot()) == {
        "documents_loaded",
        "lookups_total",
        "lookup_misses_total",
        "activation_checks_total",
        "activations_total",
        "bundle_load_ms",
    }
