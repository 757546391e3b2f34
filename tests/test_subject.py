from __future__ import annotations

from pywording.subject import MutableValueSubject


def test_subscribe_replays_current_value() -> None:
    subject = MutableValueSubject("en")
    seen: list[str] = []

    subject.subscribe(seen.append)

    assert seen == ["en"]


def test_every_send_is_published_without_coalescing() -> None:
    subject = MutableValueSubject("en")
    seen: list[str] = []
    subject.subscribe(seen.append, replay=False)

    subject.send("fr")
    subject.send("fr")
    subject.value = "de"

    assert seen == ["fr", "fr", "de"]
    assert subject.value == "de"


def test_multiple_subscribers_and_cancel() -> None:
    subject = MutableValueSubject(0)
    first: list[int] = []
    second: list[int] = []
    sub_first = subject.subscribe(first.append, replay=False)
    subject.subscribe(second.append, replay=False)

    subject.send(1)
    sub_first.cancel()
    sub_first.cancel()
    subject.send(2)

    assert first == [1]
    assert second == [1, 2]
    assert not sub_first.active
    assert subject.observer_count == 1


def test_failing_observer_does_not_block_others() -> None:
    subject = MutableValueSubject(0)
    seen: list[int] = []

    def _boom(value: int) -> None:
        raise RuntimeError("observer failed")

    subject.subscribe(_boom, replay=False)
    subject.subscribe(seen.append, replay=False)
    subject.send(5)

    assert seen == [5]
    assert subject.value == 5
