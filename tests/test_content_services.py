import asyncio

import pytest

from conftest import StubGenerator
from core.domain.errors import InvalidInputError
from core.domain.messages import (
    CATEGORY_ERROR,
    RECOMMENDATIONS_EMPTY,
    RECOMMENDATIONS_ERROR,
    REFINE_EMPTY,
    REFINE_ERROR,
)
from core.services.content_refiner import ContentRefiner, build_refine_prompt
from core.services.recommendations import (
    TRAVEL_CATEGORIES,
    RecommendationGenerator,
    build_category_prompt,
    build_recommendations_prompt,
    category_for_number,
)


def test_refine_prompt_embeds_summary_and_guidelines():
    prompt = build_refine_prompt("Eiffel Tower", "Line one.\n\nLine two.")
    assert '"Eiffel Tower"' in prompt
    assert "Line one.\n\nLine two." in prompt
    assert "headings" in prompt
    assert "Do not use bold." in prompt
    assert "indentation" in prompt
    assert prompt == build_refine_prompt("Eiffel Tower", "Line one.\n\nLine two.")


def test_refine_returns_model_text(stub_generator):
    refined = asyncio.run(ContentRefiner(stub_generator).refine("Eiffel Tower", "raw"))
    assert refined == "## Refined\n\nRefined body."
    assert stub_generator.calls[0].role == "user"


def test_refine_degrades_on_failure():
    generator = StubGenerator(fail_on=lambda payload: True)
    assert asyncio.run(ContentRefiner(generator).refine("X", "raw")) == REFINE_ERROR


def test_refine_empty_response():
    generator = StubGenerator(lambda payload: None)
    assert asyncio.run(ContentRefiner(generator).refine("X", "raw")) == REFINE_EMPTY


def test_recommendations_prompt_lists_thirteen_sections():
    prompt = build_recommendations_prompt("Kyoto")
    assert len(TRAVEL_CATEGORIES) == 13
    for index, category in enumerate(TRAVEL_CATEGORIES, start=1):
        assert f"{index}. {category}" in prompt
    assert "at least 3-4 bullet points" in prompt
    assert "for Kyoto" in prompt


def test_recommend_degrades():
    failing = StubGenerator(fail_on=lambda payload: True)
    empty = StubGenerator(lambda payload: None)
    assert asyncio.run(RecommendationGenerator(failing).recommend("Kyoto")) == RECOMMENDATIONS_ERROR
    assert asyncio.run(RecommendationGenerator(empty).recommend("Kyoto")) == RECOMMENDATIONS_EMPTY


def test_category_lookup():
    assert category_for_number(1) == "Best Time to Visit"
    assert category_for_number(13) == "Packing List and Essentials"
    assert '"Best Restaurants and Cafes"' in build_category_prompt("Rome", 6)


@pytest.mark.parametrize("number", [0, 14, -1, True])
def test_category_out_of_range_rejected_before_network(number):
    generator = StubGenerator()
    with pytest.raises(InvalidInputError):
        asyncio.run(RecommendationGenerator(generator).category_info("Rome", number))
    assert generator.calls == []


def test_category_info_degrades():
    generator = StubGenerator(fail_on=lambda payload: True)
    assert asyncio.run(RecommendationGenerator(generator).category_info("Rome", 2)) == CATEGORY_ERROR
