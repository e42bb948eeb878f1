# pagefinder

pagefinder is a small search engine for a collection of RSS/XML web pages in
Chinese and English. It covers:

- a dictionary-based word segmenter with an HMM fallback for unknown words
  (`pagefinder.segment`): mixed, full, search-engine, HMM-only and
  length-limited segmentation, part-of-speech tags, and TF-IDF / TextRank
  keyword extraction;
- building a word-frequency dictionary and a per-character index from text
  corpora, used to suggest query words ranked by edit distance and frequency;
- turning a directory of RSS files into a page library with an offset table,
  and building a TF-IDF inverted index from it;
- answering search queries by cosine similarity, returned as JSON;
- a small HTTP server that exposes both query suggestion and search.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the Python standard library.
Python 3.10 or newer is required.

## Configuration

The data-building steps read a plain text configuration file with one
`key value` pair per line; when a key appears twice, the first value wins.

| key                | meaning                                                   |
|--------------------|-----------------------------------------------------------|
| `StopWords...`     | any key starting with `StopWords` names a stop-word file  |
| `DictDir`          | directory holding `dictCn.dat` and `dictEn.dat`           |
| `EnDictMetaDir`    | directory of English source texts                         |
| `CnDictMetaDir`    | directory of Chinese source texts                         |
| `WebCorpusDir`     | directory of RSS/XML files                                |
| `PageLib`          | directory for `pageLib.xml` and the offset tables         |
| `OffsetLib`        | directory holding `offsetNewLib.dat` for searching        |
| `InvertedIndexLib` | directory for `invertIndexLib.dat`                        |

```python
from pagefinder.config import Configuration

config = Configuration("conf/myConf.conf")
stop_words = config.stop_words()     # set of words from every StopWords... file
page_dir = config.get("PageLib")
```

## Word segmentation

`Jieba` needs a main dictionary (`word freq tag` lines), an HMM model, a user
dictionary, an IDF table and a stop-word list, in the usual jieba text formats.

```python
from pagefinder.segment.jieba import Jieba
from pagefinder.split_tool import JiebaSplitTool

jieba = Jieba(
    "resource/dict/jieba.dict.utf8",
    "resource/dict/hmm_model.utf8",
    "resource/dict/user.dict.utf8",
    "resource/dict/idf.utf8",
    "resource/dict/stop_words.utf8",
)
print(jieba.cut("我来到北京清华大学"))
print(jieba.cut_all("我来到北京清华大学"))
print(jieba.cut_for_search("小明硕士毕业于中国科学院计算所"))
print(jieba.tag("我是拖拉机学院手扶拖拉机专业的。"))

jieba.insert_user_word("男默女泪")
print(jieba.find("男默女泪"))        # True

for keyword in jieba.extractor.extract("我是拖拉机学院手扶拖拉机专业的。", 5):
    print(keyword.word, keyword.weight)

tool = JiebaSplitTool(jieba)
words = tool.cut_for_search("文学、艺术理论的建设和发展")
```

`pagefinder.segment.textrank.TextRankExtractor(dict_trie, model, stop_word_path)`
ranks keywords by TextRank instead of TF-IDF; it can share `jieba.dict_trie`
and `jieba.model`.

Segmenters accept `str` (offsets count characters) or UTF-8 `bytes` (offsets
count bytes). The default separators are space, tab, newline, `，` and `。`;
`reset_separators` replaces them.

## Query suggestion

Build the dictionaries and the character index once. `build_index` reads
`dictCn.dat` and `dictEn.dat` from the configured `DictDir`, so store the
dictionaries there:

```python
from pagefinder.dict_producer import DictProducer

producer = DictProducer(tool, config)
producer.build_en_dict()
producer.store_dict("data/dictEn.dat")
producer.build_cn_dict()
producer.store_dict("data/dictCn.dat")
producer.build_index()
producer.store_index("data/DictIndex.dat")
```

Then ask for up to ten candidates that share a character with what the user
typed, best first (smallest edit distance, then highest frequency):

```python
from pagefinder.dictionary import load_dictionary
from pagefinder.recommender import KeyRecommender, edit_distance

dictionary = load_dictionary("data")     # dictCn.dat, dictEn.dat, DictIndex.dat
recommender = KeyRecommender("helo", dictionary)
recommender.query()
print(recommender.candidate_json())      # {"query": [...]}, or null when nothing matched

print(edit_distance("kitten", "sitting"))  # 3
```

Edit distance counts characters, not bytes, so Chinese and English words are
compared the same way.

## Page library and search

```python
from pagefinder.pagelib import PageLib
from pagefinder.preprocessor import PageLibPreprocessor
from pagefinder.web_info import load_web_info
from pagefinder.web_query import WebPageQuery

pages = PageLib(config)
pages.create()                                   # writes PageLib/pageLib.xml
pages.store(f"{config.get('PageLib')}/offsetLib.dat")

preprocessor = PageLibPreprocessor(tool, config)
preprocessor.read_offsets("offsetLib.dat")
preprocessor.store_on_disk()                     # PageLib/offsetNewLib.dat and pageLibNew.xml
preprocessor.build_invert_index()                # InvertedIndexLib/invertIndexLib.dat

web_info = load_web_info(config)                 # OffsetLib/offsetNewLib.dat + the index
search = WebPageQuery(tool, web_info, config)
print(search.query("马克思主义 理论 创新"))
```

`PageLib.create` strips HTML tags and entities from titles and descriptions;
items without a description get `no description`. Offsets are byte positions
in `pageLib.xml`, which is also the file the search reads pages from.

A search cuts the query, drops stop words, keeps documents that match at least
`max(2, half the query words)` of them, and returns at most ten pages ordered
by cosine similarity, each with its `title`, `content`, `url` and a
`WebPage<n>` document id.

## What the package does not do

There is no near-duplicate detection: `PageLibPreprocessor` keeps every page
that is in its offset table. `store_on_disk` writes those offsets and copies
the pages with ids 1 to 4400 into `pageLibNew.xml`; nothing is removed.

## Server

```
pagefinder-server --port 1234 --config ../conf/myConf.conf \
    --page ../resource/static/view/search.html \
    --data-dir ../data --jieba-dir ../resource/dict
```

All options are optional; the values above are the defaults. The server loads
the suggestion dictionary from `--data-dir`, the segmenter files from
`--jieba-dir` and the search index through the configuration, then answers:

- `GET /candidate` and `GET /search` with the page at `--page` (404 if missing);
- `POST /candidate` with the suggested words for the form field `query`;
- `POST /search` with the search results for the form field `query`.

POST requests must be sent as `application/x-www-form-urlencoded`; anything
else gets `400 Bad Request`. Unknown paths get 404, other methods 405. Stop
the server with Ctrl-C.

`SearchEngineServer` can also be used directly: `handle_candidate`,
`handle_search` and `static_page` return a `Response` without any network.

## Running the tests

```
pip install .[test]
pytest
```