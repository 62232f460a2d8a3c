import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# main.py refuses to start without explicit CORS origins
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
os.environ.setdefault("ALLOW_CREDENTIALS", "false")

from scorekeeper.scoring import pickleball, tennis  # noqa: E402
from scorekeeper.services import MatchDescriptor  # noqa: E402


@pytest.fixture()
def tennis_rules():
    return tennis.init_rules({})


@pytest.fixture()
def pickleball_rules():
    return pickleball.init_rules({"bestOf": 3})


@pytest.fixture()
def match():
    return MatchDescriptor(
        id="m1",
        player1_id="A",
        player1_name="Alice",
        player2_id="B",
        player2_name="Bea",
    )
