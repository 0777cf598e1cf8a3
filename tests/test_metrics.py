"""
Tests for the Prometheus observability sink.
"""

from dictionary_cache.observability import NullSink, PrometheusSink
from dictionary_cache.protocols import ObservabilitySink


def test_sinks_satisfy_protocol():
    assert isinstance(PrometheusSink(), ObservabilitySink)
    assert isinstance(NullSink(), ObservabilitySink)


def test_counters_are_labelled_by_operation():
    sink = PrometheusSink()

    sink.record_hit("resolve")
    sink.record_hit("resolve")
    sink.record_miss("resolve_random")
    sink.record_error("upstream_definition")
    sink.record_latency("resolve", 0.25)

    registry = sink.registry
    assert registry.get_sample_value("dictionary_cache_hits_total", {"operation": "resolve"}) == 2.0
    assert registry.get_sample_value("dictionary_cache_misses_total", {"operation": "resolve_random"}) == 1.0
    assert registry.get_sample_value("dictionary_errors_total", {"operation": "upstream_definition"}) == 1.0
    assert registry.get_sample_value("dictionary_operation_duration_seconds_count", {"operation": "resolve"}) == 1.0
    assert registry.get_sample_value("dictionary_operation_duration_seconds_sum", {"operation": "resolve"}) == 0.25


def test_sinks_do_not_share_state():
    first = PrometheusSink()
    second = PrometheusSink()

    first.record_hit("resolve")

    assert second.registry.get_sample_value("dictionary_cache_hits_total", {"operation": "resolve"}) is None


def test_render_exposition_format():
    sink = PrometheusSink()
    sink.record_hit("resolve")

    body = sink.render().decode()

    assert 'dictionary_cache_hits_total{operation="resolve"} 1.0' in body
