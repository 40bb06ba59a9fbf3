def test_import_bandits_package() -> None:
    import importlib

    module = importlib.import_module("bandits")
    assert module is not None
    assert module.__version__


def test_import_services_no_side_effects() -> None:
    from bandits.services import BattleService

    service = BattleService()
    assert service.turn_order.__name__ == "turn_order"
