from resume_builder.app.core.cache import ResumeCountCache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_empty_cache():
    cache = ResumeCountCache(ttl_seconds=300, clock=FakeClock())
    assert cache.get_fresh() is None
    assert cache.last_known() == 0


def test_fresh_until_ttl_expires():
    clock = FakeClock()
    cache = ResumeCountCache(ttl_seconds=300, clock=clock)
    cache.store(42)

    clock.now += 299
    assert cache.get_fresh() == 42

    clock.now += 1
    assert cache.get_fresh() is None
    assert cache.last_known() == 42


def test_reset():
    cache = ResumeCountCache(clock=FakeClock())
    cache.store(7)
    cache.reset()
    assert cache.get_fresh() is None
    assert cache.last_known() == 0
