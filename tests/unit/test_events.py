"""
Unit tests for unknown-algorithm notification.
"""

from multidigest.hashing.registry import AlgorithmDescriptor

PLACEHOLDER = AlgorithmDescriptor("ipfs-1", 1, 2)


class TestSubscription:
    """Tests for subscribe/unsubscribe bookkeeping."""

    def test_subscribe_returns_handler(self, notifier):
        """subscribe() can be used as a decorator."""

        @notifier.subscribe
        def handler(_):
            pass

        assert handler in notifier.handlers
        assert len(notifier) == 1

    def test_unsubscribe(self, notifier):
        notifier.subscribe(print)
        notifier.unsubscribe(print)
        assert len(notifier) == 0

    def test_unsubscribe_unknown_ignored(self, notifier):
        """Removing a handler that was never added is a no-op."""
        notifier.unsubscribe(print)
        assert len(notifier) == 0

    def test_clear(self, notifier, recorded):
        notifier.subscribe(print)
        notifier.clear()
        assert notifier.handlers == []

    def test_handlers_is_copy(self, notifier, recorded):
        """Mutating the returned list does not affect subscriptions."""
        notifier.handlers.clear()
        assert len(notifier) == 1


class TestPublish:
    """Tests for publish()."""

    def test_handlers_called_in_order(self, notifier):
        calls = []
        notifier.subscribe(lambda d: calls.append(("first", d.name)))
        notifier.subscribe(lambda d: calls.append(("second", d.name)))
        notifier.publish(PLACEHOLDER)
        assert calls == [("first", "ipfs-1"), ("second", "ipfs-1")]

    def test_publish_without_handlers(self, notifier, recording_logger):
        """Publishing with nobody listening still logs the code."""
        notifier.publish(PLACEHOLDER)
        assert recording_logger.messages("info") == [
            "Unknown hash algorithm code 0x1, using placeholder ipfs-1"
        ]

    def test_failing_handler_isolated(self, notifier, recorded, recording_logger):
        """A raising handler is logged and later handlers still run."""

        def broken(_):
            raise ValueError("bad handler")

        notifier.subscribe(broken)
        later = []
        notifier.subscribe(later.append)

        notifier.publish(PLACEHOLDER)

        assert recorded == [PLACEHOLDER]
        assert later == [PLACEHOLDER]
        warnings = recording_logger.messages("warning")
        assert len(warnings) == 1
        assert "bad handler" in warnings[0]

    def test_handler_may_unsubscribe_itself(self, notifier):
        """Handlers run over a snapshot, so self-removal is safe."""
        calls = []

        def once(descriptor):
            calls.append(descriptor)
            notifier.unsubscribe(once)

        notifier.subscribe(once)
        notifier.publish(PLACEHOLDER)
        notifier.publish(PLACEHOLDER)
        assert calls == [PLACEHOLDER]
