"""Tests for the star container and star items."""
import pytest

from propertyanimation.components.star_item import StarItem, build_star_path


def test_main_star_is_centered(star_field):
    star = star_field.star
    assert star_field.items() == [star]
    origin = star_field.item_origin(star)
    assert (origin.x(), origin.y()) == (150.0, 350.0)


def test_shower_items_start_at_top_left(star_field):
    item = StarItem(50, 50)
    star_field.add_item(item)
    origin = star_field.item_origin(item)
    assert (origin.x(), origin.y()) == (0.0, 0.0)


def test_remove_is_idempotent(star_field):
    item = StarItem(50, 50)
    star_field.add_item(item)
    assert star_field.has_item(item)
    assert star_field.remove_item(item) is True
    assert star_field.remove_item(item) is False
    assert not star_field.has_item(item)


def test_background_defaults_to_black(star_field):
    assert star_field.background_color.rgba() == 0xFF000000
    assert star_field.property("background_color").rgba() == 0xFF000000


def test_item_emits_changed_only_on_real_change(qapp):
    item = StarItem(10, 10)
    changes = []
    item.changed.connect(lambda: changes.append(True))
    item.rotation = 45.0
    item.rotation = 45.0
    item.alpha = 0.5
    assert len(changes) == 2
    assert item.property("rotation") == pytest.approx(45.0)


def test_star_path_fits_bounds(qapp):
    path = build_star_path(80, 40)
    rect = path.boundingRect()
    assert rect.top() == pytest.approx(-20.0)
    assert rect.width() <= 80.0
    assert rect.height() <= 40.0


def test_paints_with_transformed_items(star_field):
    star_field.star.rotation = 30.0
    star_field.star.scale_x = 2.0
    star_field.star.alpha = 0.5
    pixmap = star_field.grab()
    assert pixmap.width() == 400
    assert pixmap.height() == 800
