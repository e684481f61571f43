"""
Pytest configuration for dualrec tests.

Registers Hypothesis profiles; select one with HYPOTHESIS_PROFILE
(default: "default").
"""
import os

from hypothesis import settings, HealthCheck

settings.register_profile(
    "default",
    max_examples=60,
    deadline=None,
    print_blob=True,
)

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
