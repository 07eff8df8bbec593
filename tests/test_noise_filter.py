from roster_extractor.config import ExtractionConfig
from roster_extractor.processors import NoiseFilter


def test_short_lines_are_noise():
    assert NoiseFilter().is_noise("١ علي")
    assert NoiseFilter().is_noise("٠٠٣")


def test_page_markers_are_noise():
    assert NoiseFilter().is_noise("الصفحة رقم ٣ من ١٠")


def test_law_and_form_references_are_noise():
    noise_filter = NoiseFilter()
    assert noise_filter.is_noise("انتخابات مجلس النواب ٢٠٢٥")
    assert noise_filter.is_noise("نموذج رقم ٥ انتخابات")


def test_table_captions_are_noise():
    assert NoiseFilter().is_noise("مسلسل الاسم بالكامل")


def test_roster_lines_are_not_noise():
    noise_filter = NoiseFilter()
    assert not noise_filter.is_noise("١ محمد احمد علي")
    assert not noise_filter.is_noise("اللجنة الفرعية رقم")
    assert not noise_filter.is_noise("مدرسة النصر الإعدادية")


def test_contains_keyword():
    noise_filter = NoiseFilter()
    assert noise_filter.contains_keyword("محمد قسم الشرطة")
    assert not noise_filter.contains_keyword("محمد احمد علي")


def test_min_line_length_is_configurable():
    noise_filter = NoiseFilter(ExtractionConfig(min_line_length=3))
    assert not noise_filter.is_noise("١ علي")
