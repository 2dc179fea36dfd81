"""Global pytest configuration."""

import os

# Point the generative client at a non-routable test host before any imports
os.environ.setdefault("GENERATIVE_API_URL", "http://generative.test/proxy")
os.environ.setdefault("RNG_SEED", "42")
