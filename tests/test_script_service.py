"""Tests for app.services.script_service: script assembly."""

import random

import pytest

from app.core.exceptions import ValidationError
from app.schemas.script import ContentType, ScriptLength
from app.services.script_catalog import CONTENT_TEMPLATES, LENGTH_PROFILES
from app.services.script_service import ScriptGenerationService


class LastChoice:
    """Deterministic stand-in for random.Random that always picks the last item."""

    def choice(self, seq):
        return seq[-1]


# ---------------------------------------------------------------------------
# Length profiles
# ---------------------------------------------------------------------------

class TestLengthProfiles:
    @pytest.mark.parametrize("length,words,duration,points", [
        ("short", 800, "4-6 minutes", 3),
        ("medium", 1800, "10-12 minutes", 5),
        ("long", 3500, "20-25 minutes", 7),
    ])
    def test_profile_fields_copied(self, script_service, make_script_request, length, words, duration, points):
        script = script_service.generate_script(make_script_request(length=length))
        assert script.wordCount == words
        assert script.estimatedDuration == duration
        assert len(script.mainPoints) == points

    @pytest.mark.parametrize("length", list(ScriptLength))
    def test_timestamp_count(self, script_service, make_script_request, length):
        script = script_service.generate_script(make_script_request(length=length.value))
        assert len(script.timestamps) == LENGTH_PROFILES[length].point_count + 4

    def test_main_points_are_template_prefix(self, script_service, make_script_request):
        script = script_service.generate_script(make_script_request(length="medium", contentType="analysis"))
        expected = [
            point.format(topic="time management", audience="beginner", duration="10-12 minutes")
            for point in CONTENT_TEMPLATES[ContentType.ANALYSIS].main_points[:5]
        ]
        assert script.mainPoints == expected


# ---------------------------------------------------------------------------
# Template selection and substitution
# ---------------------------------------------------------------------------

class TestTemplates:
    @pytest.mark.parametrize("content_type", [member.value for member in ContentType])
    def test_topic_in_every_text_section(self, script_service, make_script_request, content_type):
        topic = "urban beekeeping"
        script = script_service.generate_script(make_script_request(topic=topic, contentType=content_type))
        for section in (script.hook, script.intro, script.outro, script.callToAction):
            assert topic in section

    def test_audience_substituted(self, script_service, make_script_request):
        script = script_service.generate_script(make_script_request(targetAudience="advanced"))
        assert "Whether you're a advanced" in script.intro

    def test_duration_substituted_in_tutorial_hook(self, script_service, make_script_request):
        script = script_service.generate_script(make_script_request(length="long"))
        assert "In the next 20-25 minutes" in script.hook

    def test_topic_used_verbatim(self, script_service, make_script_request):
        topic = "  C++ {templates} & <generics>  "
        script = script_service.generate_script(make_script_request(topic=topic))
        assert topic in script.hook
        assert script.seoKeywords[0] == topic

    def test_unknown_content_type_falls_back_to_tutorial(self, script_service, make_script_request):
        fallback = script_service.generate_script(make_script_request(contentType="podcast"))
        tutorial = script_service.generate_script(make_script_request(contentType="tutorial"))
        assert fallback.hook == tutorial.hook
        assert fallback.mainPoints == tutorial.mainPoints
        assert fallback.title in script_service.title_candidates("time management", ContentType.TUTORIAL)

    def test_each_content_type_has_its_own_hook(self, script_service, make_script_request):
        hooks = {
            script_service.generate_script(make_script_request(contentType=member.value)).hook
            for member in ContentType
        }
        assert len(hooks) == len(ContentType)

    def test_key_takeaways_are_fixed(self, script_service, make_script_request):
        short = script_service.generate_script(make_script_request(length="short", contentType="story"))
        long = script_service.generate_script(make_script_request(length="long", contentType="story"))
        assert short.keyTakeaways == long.keyTakeaways
        assert len(short.keyTakeaways) == 4


# ---------------------------------------------------------------------------
# SEO keywords
# ---------------------------------------------------------------------------

class TestSeoKeywords:
    def test_six_keywords_in_order(self, script_service, make_script_request):
        script = script_service.generate_script(make_script_request(topic="sourdough"))
        assert script.seoKeywords == [
            "sourdough",
            "sourdough tutorial",
            "how to sourdough",
            "sourdough guide",
            "sourdough tips",
            "sourdough 2024",
        ]

    def test_year_is_configurable(self):
        service = ScriptGenerationService(rng=random.Random(0), seo_year=2030)
        assert service.build_seo_keywords("chess")[-1] == "chess 2030"


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

class TestTimestamps:
    def test_short_timestamps(self, script_service):
        stamps = script_service.build_timestamps(LENGTH_PROFILES[ScriptLength.SHORT])
        assert [(s.time, s.section) for s in stamps] == [
            ("0:00", "Hook & Introduction"),
            ("1:30", "Main Content Begins"),
            ("1:00", "Point 1"),
            ("2:00", "Point 2"),
            ("3:00", "Point 3"),
            ("2:00", "Key Takeaways"),
            ("3:00", "Call to Action"),
        ]

    def test_medium_point_times(self, script_service):
        stamps = script_service.build_timestamps(LENGTH_PROFILES[ScriptLength.MEDIUM])
        assert [s.time for s in stamps[2:-2]] == ["2:00", "4:00", "5:00", "7:00", "8:00"]
        assert stamps[-2].time == "8:00"
        assert stamps[-1].time == "9:00"

    def test_long_point_times(self, script_service):
        stamps = script_service.build_timestamps(LENGTH_PROFILES[ScriptLength.LONG])
        assert [s.time for s in stamps[2:-2]] == ["4:00", "6:00", "8:00", "11:00", "13:00", "15:00", "17:00"]
        assert stamps[-2].time == "18:00"
        assert stamps[-1].time == "19:00"


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------

class TestTitles:
    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_title_is_a_candidate(self, make_script_request, content_type):
        service = ScriptGenerationService(rng=random.Random(7))
        candidates = service.title_candidates("gardening", content_type)
        assert len(candidates) == 4
        for _ in range(10):
            script = service.generate_script(make_script_request(topic="gardening", contentType=content_type.value))
            assert script.title in candidates

    def test_injected_selector_pins_title(self, make_script_request):
        service = ScriptGenerationService(rng=LastChoice())
        script = service.generate_script(make_script_request(topic="Python", contentType="review"))
        assert script.title == "Testing Python So You Don't Have To"

    def test_year_bearing_title(self, make_script_request):
        service = ScriptGenerationService(rng=random.Random(0), seo_year=2026)
        assert "Master Python in 2026: Everything You Need to Know" in service.title_candidates(
            "Python", ContentType.TUTORIAL
        )

    def test_same_seed_same_title(self, make_script_request):
        request = make_script_request(contentType="interview")
        first = ScriptGenerationService(rng=random.Random(42)).generate_script(request)
        second = ScriptGenerationService(rng=random.Random(42)).generate_script(request)
        assert first == second


# ---------------------------------------------------------------------------
# Shape stability and validation
# ---------------------------------------------------------------------------

class TestShape:
    def test_repeated_calls_differ_only_in_title(self, script_service, make_script_request):
        request = make_script_request(length="long", contentType="analysis")
        first = script_service.generate_script(request).model_dump(exclude={"title"})
        second = script_service.generate_script(request).model_dump(exclude={"title"})
        assert first == second

    def test_outputs_do_not_alias(self, script_service, make_script_request):
        request = make_script_request()
        first = script_service.generate_script(request)
        second = script_service.generate_script(request)
        first.mainPoints.append("extra")
        assert len(second.mainPoints) == 3
        assert len(script_service.generate_script(request).mainPoints) == 3

    @pytest.mark.parametrize("topic", ["", "   ", "\t\n"])
    def test_blank_topic_rejected(self, script_service, make_script_request, topic):
        with pytest.raises(ValidationError):
            script_service.generate_script(make_script_request(topic=topic))

    def test_scenario_time_management(self, script_service, make_script_request):
        script = script_service.generate_script(make_script_request())
        assert len(script.mainPoints) == 3
        assert script.wordCount == 800
        assert script.estimatedDuration == "4-6 minutes"
        assert script.seoKeywords[0] == "time management"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TestOptions:
    def test_options_list_every_value(self, script_service):
        options = script_service.describe_options()
        assert [row.length for row in options.lengths] == list(ScriptLength)
        assert [row.pointCount for row in options.lengths] == [3, 5, 7]
        assert len(options.contentTypes) == 5
        assert len(options.tones) == 4
        assert len(options.targetAudiences) == 4
