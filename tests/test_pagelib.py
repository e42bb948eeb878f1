import pytest

from pagefinder.config import Configuration
from pagefinder.pagelib import PageLib, remove_html_tags

FEED_A = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>c</title>
<item><title>First &lt;b&gt;post&lt;/b&gt;</title><link>http://example.com/1</link><description>&lt;p&gt;Hello&lt;/p&gt; world</description></item>
<item><title>Second</title><link>http://example.com/2</link></item>
</channel></rss>
"""

FEED_B = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel>
<item><title>Third</title><link>http://example.com/3</link><description>中文内容</description></item>
</channel></rss>
"""


def _make_config(tmp_path, feeds):
    corpus = tmp_path / "corpus"
    corpus.mkdir()
    for name, text in feeds.items():
        (corpus / name).write_text(text, encoding="utf-8")
    lib = tmp_path / "lib"
    lib.mkdir()
    conf = tmp_path / "my.conf"
    conf.write_text(f"WebCorpusDir {corpus}\nPageLib {lib}\n", encoding="utf-8")
    return Configuration(conf), lib


def test_remove_html_tags_strips_tags_and_entities():
    assert remove_html_tags("a<br/>b&nbsp;c") == "abc"
    assert remove_html_tags("<p>Hello</p> &amp; world") == "Hello  world"


def test_remove_html_tags_spans_lines():
    assert remove_html_tags("x<a\nhref='y'>z") == "xz"


def test_create_writes_records_and_offsets(tmp_path):
    config, lib = _make_config(tmp_path, {"a.xml": FEED_A, "b.xml": FEED_B})
    page_lib = PageLib(config)
    offsets = page_lib.create()
    data = (lib / "pageLib.xml").read_bytes()

    assert sorted(offsets) == [1, 2, 3]
    position = 0
    for doc_id in sorted(offsets):
        pos, length = offsets[doc_id]
        assert pos == position
        position += length
    assert position == len(data)

    pos, length = offsets[1]
    expected = (
        "<doc>\n"
        "    <docId>1</docId>\n"
        "    <title>First post</title>\n"
        "    <link>http://example.com/1</link>\n"
        "    <content>Hello world</content>\n"
        "</doc>\n\n"
    ).encode("utf-8")
    assert data[pos:pos + length] == expected


def test_missing_description_and_utf8_lengths(tmp_path):
    config, lib = _make_config(tmp_path, {"a.xml": FEED_A, "b.xml": FEED_B})
    offsets = PageLib(config).create()
    data = (lib / "pageLib.xml").read_bytes()
    pos, length = offsets[2]
    assert b"<content>no description</content>" in data[pos:pos + length]
    pos, length = offsets[3]
    record = data[pos:pos + length]
    assert record.startswith(b"<doc>\n")
    assert record.endswith(b"</doc>\n\n")
    assert "中文内容".encode("utf-8") in record


def test_store_writes_offset_lines(tmp_path):
    config, lib = _make_config(tmp_path, {"a.xml": FEED_A})
    page_lib = PageLib(config)
    offsets = page_lib.create()
    out = tmp_path / "offsetLib.dat"
    page_lib.store(out)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines == [f"{d} {p} {n}" for d, (p, n) in sorted(offsets.items())]


def test_malformed_feed_raises(tmp_path):
    config, _ = _make_config(tmp_path, {"bad.xml": "<rss><channel><item>"})
    with pytest.raises(ValueError):
        PageLib(config).create()


def test_non_rss_root_raises(tmp_path):
    config, _ = _make_config(tmp_path, {"feed.xml": "<feed><entry/></feed>"})
    with pytest.raises(ValueError):
        PageLib(config).create()