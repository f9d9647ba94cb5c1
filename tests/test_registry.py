"""Tests for PresenterRegistry."""

import logging

import pytest

from pres import (
    PresConfiguration,
    Presenter,
    PresenterImportError,
    PresenterNotFoundError,
    PresenterRegistry,
    create_registry,
)
from pres.registry import import_presenter


class Widget:
    pass


class WidgetPresenter(Presenter, register=False):
    pass


class OtherWidgetPresenter(Presenter, register=False):
    pass


def test_register_and_get(registry):
    registry.register(WidgetPresenter)

    assert registry.get("WidgetPresenter") is WidgetPresenter
    assert "WidgetPresenter" in registry
    assert len(registry) == 1


def test_register_as_decorator(registry):
    @registry.register
    class GadgetPresenter(Presenter, register=False):
        pass

    assert registry.get("GadgetPresenter") is GadgetPresenter


def test_register_decorator_with_name(registry):
    @registry.register(name="WidgetPresenter")
    class CustomPresenter(Presenter, register=False):
        pass

    assert registry.lookup_for(Widget) is CustomPresenter


def test_get_missing_raises_lookup_error(registry):
    with pytest.raises(PresenterNotFoundError) as exc_info:
        registry.get("NopePresenter")

    assert isinstance(exc_info.value, LookupError)
    assert exc_info.value.name == "NopePresenter"


def test_lookup_for_uses_suffix(registry):
    registry.register(WidgetPresenter)

    assert registry.presenter_name_for(Widget) == "WidgetPresenter"
    assert registry.lookup_for(Widget) is WidgetPresenter


def test_custom_suffix():
    registry = PresenterRegistry(presenter_suffix="View")
    registry.register(WidgetPresenter, name="WidgetView")

    assert registry.lookup_for(Widget) is WidgetPresenter


def test_reregister_replaces_and_warns(registry, caplog):
    registry.register(WidgetPresenter)

    with caplog.at_level(logging.WARNING, logger="pres.registry"):
        registry.register(OtherWidgetPresenter, name="WidgetPresenter")

    assert registry.get("WidgetPresenter") is OtherWidgetPresenter
    assert "Replacing presenter 'WidgetPresenter'" in caplog.text


def test_reregister_same_class_is_silent(registry, caplog):
    registry.register(WidgetPresenter)

    with caplog.at_level(logging.WARNING, logger="pres.registry"):
        registry.register(WidgetPresenter)

    assert caplog.records == []


def test_unregister(registry):
    registry.register(WidgetPresenter)
    registry.unregister("WidgetPresenter")

    assert "WidgetPresenter" not in registry
    with pytest.raises(PresenterNotFoundError):
        registry.unregister("WidgetPresenter")


def test_names_and_clear(registry):
    registry.register(WidgetPresenter)
    registry.register(OtherWidgetPresenter)

    assert registry.names() == ["OtherWidgetPresenter", "WidgetPresenter"]

    registry.clear()
    assert len(registry) == 0


def test_import_presenter():
    assert import_presenter("pres.presenter:Presenter") is Presenter


@pytest.mark.parametrize(
    "path",
    [
        "no_colon_here",
        "pres_does_not_exist.module:Thing",
        "pres.presenter:Missing",
        "pres.registry:default_registry",
    ],
)
def test_import_presenter_errors(path):
    with pytest.raises(PresenterImportError):
        import_presenter(path)


def test_register_path(registry):
    registry.register_path("WidgetPresenter", "pres.presenter:Presenter")

    assert registry.lookup_for(Widget) is Presenter


def test_create_registry_from_config():
    config = PresConfiguration(
        presenter_suffix="Decorator",
        presenters={"WidgetDecorator": "pres.presenter:Presenter"},
    )

    registry = create_registry(config)

    assert registry.presenter_suffix == "Decorator"
    assert registry.lookup_for(Widget) is Presenter


def test_create_registry_without_config_is_empty():
    registry = create_registry()

    assert len(registry) == 0
    assert registry.presenter_suffix == "Presenter"


def test_failed_configure_leaves_registry_unchanged(registry):
    config = PresConfiguration(
        presenter_suffix="View",
        presenters={
            "WidgetView": "pres.presenter:Presenter",
            "GadgetView": "pres_does_not_exist.module:Gadget",
        },
    )

    with pytest.raises(PresenterImportError):
        registry.configure(config)

    assert registry.presenter_suffix == "Presenter"
    assert registry.names() == []
