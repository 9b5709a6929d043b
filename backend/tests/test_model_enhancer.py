"""Model enhancer tests."""

import logging

from sqlalchemy import inspect

from app.db.models import FeaturedProduct, PrintifyCache
from app.utils.model_enhancer import enhance_model, enhance_model_options, standardize_attributes


def test_paranoid_options_get_all_timestamp_columns():
    assert enhance_model_options({"paranoid": True}) == {
        "paranoid": True,
        "underscored": True,
        "created_at_column": "created_at",
        "updated_at_column": "updated_at",
        "deleted_at_column": "deleted_at",
    }


def test_default_options_skip_deleted_at():
    options = enhance_model_options({"table_name": "orders"})
    assert options["created_at_column"] == "created_at"
    assert options["updated_at_column"] == "updated_at"
    assert "deleted_at_column" not in options


def test_disabled_timestamps():
    assert enhance_model_options({"timestamps": False, "paranoid": True}) == {
        "timestamps": False,
        "paranoid": True,
        "underscored": True,
    }


def test_underscored_is_forced_and_input_untouched():
    original = {"underscored": False, "timestamps": True}
    options = enhance_model_options(original)
    assert options["underscored"] is True
    assert original == {"underscored": False, "timestamps": True}


def test_standardize_attributes_is_identity():
    attributes = {"display_order": object()}
    assert standardize_attributes(attributes) is attributes


def test_enhance_model_attaches_helpers(caplog):
    class Profile:
        def __init__(self, first_name):
            self.first_name = first_name

        def to_plain_object(self):
            return {"first_name": self.first_name}

    with caplog.at_level(logging.INFO, logger="app.utils.model_enhancer"):
        assert enhance_model(Profile) is True

    profile = Profile("A")
    assert profile.to_camel_case() == {"firstName": "A"}
    assert Profile.to_camel_case(profile) == {"firstName": "A"}
    assert Profile.to_camel_case(None) is None
    assert "Enhanced model: Profile" in caplog.text


def test_enhance_model_failure_is_logged_not_raised(caplog):
    with caplog.at_level(logging.ERROR, logger="app.utils.model_enhancer"):
        assert enhance_model(int) is False
    assert "Error enhancing model int" in caplog.text


def test_database_models_are_enhanced():
    product = FeaturedProduct(printify_product_id="p1", display_order=3)
    assert product.to_camel_case()["displayOrder"] == 3
    assert FeaturedProduct.to_camel_case(product)["printifyProductId"] == "p1"


def test_timestamp_columns_follow_options():
    product_columns = set(inspect(FeaturedProduct).columns.keys())
    cache_columns = set(inspect(PrintifyCache).columns.keys())

    assert {"created_at", "updated_at", "deleted_at"} <= product_columns
    assert {"created_at", "updated_at"} <= cache_columns
    assert "deleted_at" not in cache_columns
    assert FeaturedProduct.__model_options__["underscored"] is True
