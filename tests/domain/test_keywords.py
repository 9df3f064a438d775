"""Tests for keyword coverage."""

from resume_tuner.domain import keyword_coverage


def test_present_and_missing_keep_order(sample_resume):
    coverage = keyword_coverage(sample_resume, ["Kubernetes", "Terraform", "python", "AWS"])
    assert coverage.present == ["Kubernetes", "python"]
    assert coverage.missing == ["Terraform", "AWS"]
    assert coverage.ratio == 0.5


def test_whole_word_matching():
    coverage = keyword_coverage("Good communicator", ["Go"])
    assert coverage.missing == ["Go"]


def test_multi_word_phrase_across_whitespace():
    coverage = keyword_coverage("Built machine\n  learning pipelines", ["Machine Learning"])
    assert coverage.present == ["Machine Learning"]


def test_symbol_keywords():
    coverage = keyword_coverage("Languages: C++, C#, Node.js", ["C++", "C#", "node.js", "C"])
    assert coverage.present == ["C++", "C#", "node.js", "C"]


def test_blank_and_duplicate_keywords_are_skipped():
    coverage = keyword_coverage("python", ["Python", " ", "PYTHON", "", "rust"])
    assert coverage.present == ["Python"]
    assert coverage.missing == ["rust"]


def test_no_keywords():
    coverage = keyword_coverage("anything", [])
    assert coverage.present == []
    assert coverage.missing == []
    assert coverage.ratio == 1.0
