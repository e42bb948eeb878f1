import pytest

from pagefinder.segment.jieba import Jieba

DICT_LINES = [
    "文学 500 n",
    "艺术 400 n",
    "理论 300 n",
    "中国 200 ns",
    "科学 150 n",
    "学院 120 n",
    "科学院 100 n",
    "中国科学院 800 nt",
    "发展 80 vn",
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


def _write(path, lines):
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def jieba(tmp_path):
    return Jieba(
        _write(tmp_path / "dict.utf8", DICT_LINES),
        _write(tmp_path / "hmm.utf8", HMM_LINES),
        "",
        _write(tmp_path / "idf.utf8", ["文学 2.0", "艺术 3.0"]),
        _write(tmp_path / "stop.utf8", ["的"]),
    )


def test_cut_covers_sentence(jieba):
    sentence = "文学、艺术理论的建设和发展"
    words = jieba.cut(sentence)
    assert "".join(words) == sentence
    assert "文学" in words and "艺术" in words and "发展" in words


def test_cut_without_hmm_covers_sentence(jieba):
    sentence = "他来到了中国科学院"
    assert "".join(jieba.cut(sentence, False)) == sentence


def test_cut_all_lists_dictionary_words(jieba):
    words = jieba.cut_all("中国科学院")
    assert {"中国", "科学", "学院", "科学院", "中国科学院"} <= set(words)


def test_cut_for_search_has_sub_words(jieba):
    words = jieba.cut_for_search("中国科学院")
    assert words[-1] == "中国科学院"
    assert "科学院" in words


def test_cut_hmm_covers_sentence(jieba):
    sentence = "甲乙丙丁CEO123"
    words = jieba.cut_hmm(sentence)
    assert "".join(words) == sentence
    assert "CEO123" in words


def test_cut_small_limits_length(jieba):
    assert jieba.cut_small("中国", 1) == ["中", "国"]
    assert all(len(w) <= 2 for w in jieba.cut_small("中国科学院", 2))


def test_tag(jieba):
    assert jieba.tag("中国的") == [("中国", "ns"), ("的", "uj")]


def test_lookup_tag(jieba):
    assert jieba.lookup_tag("艺术") == "n"
    assert jieba.lookup_tag("123") == "m"
    assert jieba.lookup_tag("CEO") == "eng"
    assert jieba.lookup_tag("。") == "x"


def test_insert_and_delete_user_word(jieba):
    assert not jieba.find("男默女泪")
    jieba.insert_user_word("男默女泪")
    assert jieba.find("男默女泪")
    assert jieba.cut("男默女泪") == ["男默女泪"]
    jieba.delete_user_word("男默女泪")
    assert not jieba.find("男默女泪")


def test_load_user_dict_lines(jieba):
    jieba.load_user_dict(["拖拉机 10 n"])
    assert jieba.find("拖拉机")
    assert jieba.lookup_tag("拖拉机") == "n"


def test_reset_separators(jieba):
    jieba.reset_separators("|")
    words = jieba.cut("文学|艺术")
    assert words == ["文学", "|", "艺术"]
    with pytest.raises(ValueError):
        jieba.reset_separators("||")


def test_extractor_available(jieba):
    keywords = jieba.extractor.extract("文学艺术艺术", 5)
    assert [k.word for k in keywords] == ["艺术", "文学"]