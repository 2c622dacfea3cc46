from lexicon.trie import LexiconTrie


def _trie(*words):
    t = LexiconTrie()
    for w in words:
        t.insert(w)
    return t


def test_insert_and_contains():
    t = LexiconTrie()
    assert t.insert("car") is True
    assert t.insert("card") is True
    assert t.insert("cat") is True

    assert t.contains("car") is True
    assert t.contains("card") is True
    assert t.contains("cat") is True
    assert t.contains("ca") is False
    assert t.contains("cars") is False
    assert t.contains("dog") is False
    assert "cat" in t
    assert t.size() == 3
    assert len(t) == 3


def test_insert_twice():
    t = _trie("dog")
    assert t.insert("dog") is False
    assert t.size() == 1


def test_insert_existing_prefix_marks_word():
    t = _trie("card")
    assert t.contains("car") is False

    assert t.insert("car") is True
    assert t.contains("car") is True
    assert t.size() == 2
    assert t.insert("car") is False
    assert t.size() == 2


def test_insert_empty_word():
    t = LexiconTrie()
    assert t.insert("") is False
    assert t.size() == 0
    assert t.contains("") is False


def test_contains_prefix():
    t = _trie("apple", "app")
    assert t.contains_prefix("") is True
    assert t.contains_prefix("a") is True
    assert t.contains_prefix("app") is True
    assert t.contains_prefix("apple") is True
    assert t.contains_prefix("apples") is False
    assert t.contains_prefix("b") is False
    assert LexiconTrie().contains_prefix("") is True


def test_locate():
    t = _trie("cat")
    assert t.locate("") is t.root
    assert t.locate("ca").char == "a"
    assert t.locate("ca").is_word is False
    assert t.locate("cat").is_word is True
    assert t.locate("cow") is None


def test_remove():
    t = _trie("bat", "batch", "bath")

    assert t.remove("bat") is True
    assert t.contains("bat") is False
    assert t.contains("batch") is True
    assert t.contains("bath") is True
    assert t.size() == 2

    assert t.remove("batch") is True
    assert t.contains("bath") is True
    assert t.size() == 1

    assert t.remove("bath") is True
    assert t.size() == 0
    assert t.root.has_children() is False


def test_remove_absent():
    t = _trie("bat", "batch")
    assert t.remove("batman") is False
    assert t.remove("ba") is False
    assert t.remove("") is False
    assert t.size() == 2
    assert list(t.all_words()) == ["bat", "batch"]


def test_remove_prunes_dead_branch():
    t = _trie("car", "cart", "dog")
    assert t.remove("cart") is True

    car = t.locate("car")
    assert car.is_word is True
    assert car.has_children() is False
    assert t.contains_prefix("cart") is False

    assert t.remove("dog") is True
    assert t.root.get_child("d") is None
    assert t.contains_prefix("do") is False


def test_remove_keeps_shared_prefix():
    t = _trie("card", "care")
    assert t.remove("card") is True

    assert [child.char for child in t.locate("car")] == ["e"]
    assert t.contains("care") is True


def test_remove_word_with_descendants_keeps_nodes():
    t = _trie("car", "card")
    assert t.remove("car") is True
    assert t.contains_prefix("car") is True
    assert t.contains("card") is True


def test_all_words_sorted():
    words = ["dog", "card", "cat", "car", "apple", "a", "zoo"]
    t = _trie(*words)

    result = list(t.all_words())
    assert result == sorted(words)
    assert list(t) == result
    assert all(t.contains(w) for w in result)


def test_all_words_restarts_after_mutation():
    t = _trie("b", "c")
    assert list(t.all_words()) == ["b", "c"]
    t.insert("a")
    t.remove("c")
    assert list(t.all_words()) == ["a", "b"]
    assert list(LexiconTrie().all_words()) == []


def test_words_with_prefix():
    t = _trie("dog", "door", "doom", "doll", "do", "cat")
    assert t.words_with_prefix("do") == ["do", "dog", "doll", "doom", "door"]
    assert t.words_with_prefix("c") == ["cat"]
    assert t.words_with_prefix("z") == []
    assert t.words_with_prefix("") == list(t.all_words())


def test_example_lexicon():
    t = _trie("cat", "car", "card", "dog")

    assert t.size() == 4
    assert list(t.all_words()) == ["car", "card", "cat", "dog"]
    assert t.match_pattern("ca?") == {"car", "cat"}
    assert t.match_pattern("ca*") == {"car", "card", "cat"}
    assert t.suggest_corrections("cat", 1) == {"car", "cat"}

    assert t.remove("card") is True
    assert t.size() == 3
    assert t.contains("car") is True
    assert t.contains("cat") is True


def test_suggest_corrections():
    t = _trie("cat", "cot", "cut", "bat", "bot", "dog", "cats")

    assert t.suggest_corrections("cat", 0) == {"cat"}
    assert t.suggest_corrections("cat", 1) == {"cat", "cot", "cut", "bat"}
    assert t.suggest_corrections("cat", 2) == {"cat", "cot", "cut", "bat", "bot"}
    assert t.suggest_corrections("cat", 3) == {"cat", "cot", "cut", "bat", "bot", "dog"}


def test_suggest_corrections_edge_cases():
    t = _trie("cat")
    assert t.suggest_corrections("xyz", 2) == set()
    assert t.suggest_corrections("ca", 5) == set()
    assert t.suggest_corrections("cat", -1) == set()
    assert t.suggest_corrections("", 1) == set()


def test_match_single_wildcard():
    t = _trie("cat", "bat", "hat")
    assert t.match_pattern("_at") == {"cat", "bat", "hat"}

    t.insert("rat")
    assert t.match_pattern("_at") == {"cat", "bat", "hat", "rat"}
    assert t.match_pattern("__") == set()
    assert t.match_pattern("___") == {"cat", "bat", "hat", "rat"}


def test_match_literal():
    t = _trie("cat", "car")
    assert t.match_pattern("cat") == {"cat"}
    assert t.match_pattern("ca") == set()
    assert t.match_pattern("dog") == set()
    assert t.match_pattern("") == set()


def test_match_optional():
    t = _trie("color", "colour", "colouur")
    assert t.match_pattern("colo?r") == {"color", "colour"}


def test_match_star():
    t = _trie("cat", "chat", "coat", "ct", "dog")
    assert t.match_pattern("c*t") == {"cat", "chat", "coat", "ct"}
    assert t.match_pattern("*") == {"cat", "chat", "coat", "ct", "dog"}
    assert t.match_pattern("**t") == {"cat", "chat", "coat", "ct"}
    assert t.match_pattern("*g") == {"dog"}
    assert t.match_pattern("d*") == {"dog"}
    assert t.match_pattern("x*") == set()


def test_match_mixed():
    t = _trie("bread", "break", "bream", "broad", "brand")
    assert t.match_pattern("bre_?") == {"bread", "break", "bream"}
    assert t.match_pattern("b*d") == {"bread", "broad", "brand"}
    assert t.match_pattern("_r*a_") == {"bread", "break", "bream", "broad"}
