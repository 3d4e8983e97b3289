"""
Shared fixtures for tweakjson tests.
"""

import logging

import pytest

from tweakjson.build_models import BuildSnapshot
from tweakjson.tweakjson_config import TweakjsonConfig
from tweakjson.tweakjson_logger import TweakjsonLogger
from tests.test_utils import make_snapshot_dict


@pytest.fixture
def logger():
    logging.getLogger("tweakjson").setLevel(logging.DEBUG)
    return TweakjsonLogger()


@pytest.fixture
def config(tmp_path):
    return TweakjsonConfig(output_path=str(tmp_path / "build" / "tweaker.json"))


@pytest.fixture
def bar_snapshot():
    """One runtime dependency, com.foo:bar:1.0, backed by one classpath file."""
    return BuildSnapshot.from_dict(
        make_snapshot_dict(
            dependencies=[
                {"group": "com.foo", "name": "bar", "version": "1.0", "files": ["/cache/bar-1.0.jar"]}
            ],
            classpath=["/cache/bar-1.0.jar"],
        )
    )
