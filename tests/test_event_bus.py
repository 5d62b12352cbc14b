"""
Tests for typed event dispatch.

Covers:
- Per-event-class handler tables
- Subscription order and duplicate subscriptions
- Re-entrant emission during dispatch
- Subscription changes during dispatch
- Isolation of failing handlers
"""
import logging

import pytest

from group_transform import Dimensions, EventBus, MoveEvent, ResizeEvent, RotateEvent


@pytest.fixture
def bus():
    return EventBus()


class TestSubscription:

    def test_handlers_only_see_their_event_class(self, bus):
        seen = []
        bus.subscribe(RotateEvent, lambda e: seen.append(('rotate', e.target_id)))
        bus.subscribe(MoveEvent, lambda e: seen.append(('move', e.target_id)))
        bus.emit(MoveEvent('n', 1, 2))
        bus.emit(RotateEvent('m', 0.5))
        assert seen == [('move', 'n'), ('rotate', 'm')]

    def test_subscription_order_preserved(self, bus):
        calls = []
        for name in ('first', 'second', 'third'):
            bus.subscribe(MoveEvent, lambda e, name=name: calls.append(name))
        bus.emit(MoveEvent('n', 0, 1))
        assert calls == ['first', 'second', 'third']

    def test_duplicate_subscription_ignored(self, bus):
        calls = []
        handler = calls.append
        bus.subscribe(RotateEvent, handler)
        bus.subscribe(RotateEvent, handler)
        assert bus.handler_count(RotateEvent) == 1
        bus.emit(RotateEvent('n', 1.0))
        assert len(calls) == 1

    def test_unsubscribe(self, bus):
        calls = []
        handler = calls.append
        bus.subscribe(ResizeEvent, handler)
        bus.unsubscribe(ResizeEvent, handler)
        bus.emit(ResizeEvent('n', 1, 1, 2, Dimensions(10, 10)))
        assert calls == []

    def test_unsubscribe_unknown_handler_is_noop(self, bus):
        bus.unsubscribe(MoveEvent, print)
        assert bus.handler_count(MoveEvent) == 0

    def test_unknown_event_type_rejected(self, bus):
        with pytest.raises(ValueError):
            bus.subscribe(dict, print)

    def test_event_kind_tags(self):
        assert RotateEvent.kind == 'rotate'
        assert ResizeEvent.kind == 'resize'
        assert MoveEvent.kind == 'move'


class TestDispatch:

    def test_reentrant_emit_delivered_immediately(self, bus):
        order = []

        def on_rotate(event):
            order.append(f'rotate:{event.target_id}')
            if event.target_id == 'parent':
                bus.emit(RotateEvent('child', event.rotation))
                order.append('after-child')

        bus.subscribe(RotateEvent, on_rotate)
        bus.emit(RotateEvent('parent', 1.0))
        assert order == ['rotate:parent', 'rotate:child', 'after-child']

    def test_subscribe_during_dispatch_applies_to_next_event(self, bus):
        late_calls = []

        def late(event):
            late_calls.append(event.target_id)

        def subscriber(event):
            bus.subscribe(MoveEvent, late)

        bus.subscribe(MoveEvent, subscriber)
        bus.emit(MoveEvent('first', 1, 1))
        assert late_calls == []
        bus.emit(MoveEvent('second', 1, 1))
        assert late_calls == ['second']

    def test_unsubscribe_during_dispatch_still_runs_current(self, bus):
        calls = []

        def second(event):
            calls.append(event.target_id)

        def first(event):
            bus.unsubscribe(MoveEvent, second)

        bus.subscribe(MoveEvent, first)
        bus.subscribe(MoveEvent, second)
        bus.emit(MoveEvent('a', 1, 1))
        bus.emit(MoveEvent('b', 1, 1))
        assert calls == ['a']

    def test_failing_handler_logged_and_isolated(self, bus, caplog):
        calls = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(MoveEvent, broken)
        bus.subscribe(MoveEvent, calls.append)

        with caplog.at_level(logging.ERROR, logger='EventBus'):
            bus.emit(MoveEvent('n', 1, 1))

        assert len(calls) == 1
        assert any(record.exc_info for record in caplog.records)
