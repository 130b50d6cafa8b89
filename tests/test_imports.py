def test_import_geoquest_package() -> None:
    import importlib

    module = importlib.import_module("geoquest")
    assert module is not None


def test_import_scheduler_no_side_effects() -> None:
    from geoquest.core.scheduler import ManualScheduler

    scheduler = ManualScheduler()
    assert scheduler.pending_count() == 0
    assert scheduler.now_ms() == 0.0
