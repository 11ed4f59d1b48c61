import random

from fastapi import Request

from textgen import TextGenerator


def get_text_generator(request: Request) -> TextGenerator:
    """
    The generator is built once in main.py and hung off app.state.
    Tests swap it via app.dependency_overrides.
    """
    return request.app.state.text_generator


def get_rng() -> random.Random:
    # fresh per request; nothing shared between requests
    return random.Random()
