import pytest

from pagefinder.segment.trie import DictUnit, Trie
from pagefinder.segment.unicode import decode_runes, decode_unicode

WORDS = ["中", "中国", "中国人", "人民"]


def make_trie():
    units = {w: DictUnit(decode_unicode(w), -float(i + 1), "n") for i, w in enumerate(WORDS)}
    trie = Trie([u.word for u in units.values()], list(units.values()))
    return trie, units


def test_find_each_word():
    trie, units = make_trie()
    for word in WORDS:
        assert trie.find(decode_unicode(word)) is units[word]


def test_find_missing_prefix_and_empty():
    trie, _ = make_trie()
    assert trie.find(decode_unicode("人")) is None
    assert trie.find(decode_unicode("国")) is None
    assert trie.find(()) is None


def test_find_accepts_rune_strs():
    trie, units = make_trie()
    assert trie.find(decode_runes("中国")) is units["中国"]


def test_find_dags():
    trie, units = make_trie()
    runes = decode_runes("中国人民")
    dags = trie.find_dags(runes)
    assert len(dags) == len(runes)
    assert [d.rune for d in dags] == runes
    assert dags[0].nexts == [(0, units["中"]), (1, units["中国"]), (2, units["中国人"])]
    assert dags[1].nexts == [(1, None)]
    assert dags[2].nexts == [(2, None), (3, units["人民"])]
    assert dags[3].nexts == [(3, None)]


def test_find_dags_respects_max_word_len():
    trie, units = make_trie()
    dags = trie.find_dags(decode_runes("中国人"), max_word_len=2)
    assert dags[0].nexts == [(0, units["中"]), (1, units["中国"])]


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        Trie([decode_unicode("中")], [])


def test_insert_and_empty_key():
    trie, _ = make_trie()
    unit = DictUnit(decode_unicode("民主"), -1.0, "n")
    trie.insert(unit.word, unit)
    assert trie.find(unit.word) is unit
    trie.insert((), DictUnit((), 0.0, "x"))
    assert trie.find(()) is None


def test_delete_drops_first_rune_branch():
    trie, units = make_trie()
    trie.delete(decode_unicode("中国"))
    assert trie.find(decode_unicode("中")) is None
    assert trie.find(decode_unicode("中国人")) is None
    assert trie.find(decode_unicode("人民")) is units["人民"]


def test_delete_missing_keeps_others():
    trie, units = make_trie()
    trie.delete(decode_unicode("国"))
    trie.delete(())
    assert trie.find(decode_unicode("人民")) is units["人民"]
    assert trie.find(decode_unicode("中国")) is units["中国"]