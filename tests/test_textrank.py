import pytest

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.hmm import HMMModel
from pagefinder.segment.keyword_extractor import Keyword
from pagefinder.segment.textrank import TextRankExtractor, WordGraph

DICT_LINES = [
    "中国科学院 800 nt",
    "发展 80 vn",
    "艺术 400 n",
    "理论 300 n",
    "的 1000 uj",
]

HMM_LINES = [
    "-0.26 -3.14e+100 -3.14e+100 -1.46",
    "-3.14e+100 -0.51 -0.91 -3.14e+100",
    "-0.59 -3.14e+100 -3.14e+100 -0.81",
    "-3.14e+100 -0.33 -1.26 -3.14e+100",
    "-0.72 -3.14e+100 -3.14e+100 -0.67",
    "甲:-1.0,乙:-2.0",
    "乙:-1.0,甲:-2.0",
    "丙:-1.0",
    "丁:-1.0",
]

SENTENCE = "中国科学院发展艺术理论艺术"


def _write(path, lines):
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def parts(tmp_path):
    dict_trie = DictTrie(_write(tmp_path / "dict.utf8", DICT_LINES))
    model = HMMModel(_write(tmp_path / "hmm.utf8", HMM_LINES))
    return dict_trie, model, tmp_path


def test_empty_graph_leaves_words():
    words = {"x": Keyword("x", [], 0.5)}
    WordGraph().rank(words)
    assert words["x"].weight == 0.5


def test_extract_sorted(parts):
    dict_trie, model, tmp_path = parts
    extractor = TextRankExtractor(dict_trie, model, _write(tmp_path / "stop.utf8", ["的"]))
    keywords = extractor.extract(SENTENCE, 10)
    weights = [k.weight for k in keywords]
    assert weights == sorted(weights, reverse=True)
    assert weights[0] == pytest.approx(1.0)
    assert {k.word for k in keywords} == {"中国科学院", "发展", "艺术", "理论"}


def test_extract_offsets(parts):
    dict_trie, model, tmp_path = parts
    extractor = TextRankExtractor(dict_trie, model, _write(tmp_path / "stop.utf8", ["的"]))
    art = next(k for k in extractor.extract(SENTENCE, 10) if k.word == "艺术")
    assert art.offsets == [SENTENCE.index("艺术"), SENTENCE.rindex("艺术")]


def test_extract_stop_words_and_limit(parts):
    dict_trie, model, tmp_path = parts
    extractor = TextRankExtractor(dict_trie, model, _write(tmp_path / "stop.utf8", ["理论"]))
    keywords = extractor.extract(SENTENCE, 2)
    assert len(keywords) == 2
    assert all(k.word != "理论" for k in extractor.extract(SENTENCE, 10))


def test_empty_stop_file_rejected(parts):
    dict_trie, model, tmp_path = parts
    empty = tmp_path / "empty.utf8"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        TextRankExtractor(dict_trie, model, empty)