import pytest

from harbol.hstring import HarbolString


def test_init_and_len():
    p = HarbolString("test ptr with cstr!")
    assert str(p) == "test ptr with cstr!"
    assert len(p) == 19


def test_empty_init():
    s = HarbolString("")
    assert s.is_empty()
    assert len(s) == 0


def test_add_chars():
    p = HarbolString("test ptr with cstr!")
    p.add_char(" ")
    p.add_char("6")
    assert str(p) == "test ptr with cstr! 6"


def test_add_char_rejects_multiple():
    with pytest.raises(ValueError):
        HarbolString("a").add_char("ab")


def test_add_char_rep():
    s = HarbolString("x")
    s.add_char_rep("-", 3)
    assert str(s) == "x---"


def test_add_cstr():
    p = HarbolString("test ptr with cstr! 6")
    assert p.add(" 'new string!'")
    assert str(p) == "test ptr with cstr! 6 'new string!'"


def test_add_empty_is_refused():
    s = HarbolString("abc")
    assert s.add("") is False
    assert str(s) == "abc"


def test_append_string_objects():
    p = HarbolString("x")
    i = HarbolString("y")
    p.copy("A")
    i.copy("B")
    p.add(i)
    i.add(p)
    assert str(p) == "AB"
    assert str(i) == "BAB"
    p.copy("copied from ptr!")
    i.add(p)
    assert str(p) == "copied from ptr!"
    assert str(i) == "BABcopied from ptr!"


def test_copy_empty_keeps_contents():
    s = HarbolString("keep")
    assert s.copy("") is False
    assert s == "keep"


def test_format_clear():
    i = HarbolString("junk")
    written = i.format(True, "%i + %f + %i", 900, 4242.2, 10)
    assert str(i) == "900 + 4242.200000 + 10"
    assert written == len(i)
    i.format(True, "%i + %f", 900, 4242.2)
    assert str(i) == "900 + 4242.200000"


def test_format_concatenation():
    i = HarbolString()
    i.format(True, "%i + %f + %i + ", 900, 4242.2, 10)
    assert str(i) == "900 + 4242.200000 + 10 + "
    i.format(False, "%i + %f + %i", 900, 4242.2, 10)
    assert str(i) == "900 + 4242.200000 + 10 + 900 + 4242.200000 + 10"


@pytest.mark.parametrize(
    "text, expected",
    [("test", "tset"), ("abcd", "dcba"), ("hello world!", "!dlrow olleh")],
)
def test_reverse(text, expected):
    s = HarbolString(text)
    assert s.reverse()
    assert str(s) == expected


def test_remove_char():
    s = HarbolString("!dlrow olleh")
    assert s.remove_char("l") == 3
    assert str(s) == "!drow oeh"


def test_count_substring():
    assert HarbolString("abababababa").count("ba") == 5


def test_count_empty_substring_raises():
    with pytest.raises(ValueError):
        HarbolString("abc").count("")


def test_replace_all():
    p = HarbolString("a_____BBa_BBa__BBa___BBa____BBa")
    assert len(p) == 31
    assert p.replace("BB", "    ", -1)
    assert str(p) == "a_____    a_    a__    a___    a____    a"
    assert len(p) == 41


def test_replace_missing():
    s = HarbolString("abc")
    assert s.replace("zz", "y") is False
    assert s == "abc"


def test_offsets_of_newlines():
    p = HarbolString("int i;\n lol;\n if(lel){\n\t\td+=1000;}")
    n = p.count("\n")
    assert n == 3
    offs = p.offsets("\n", n)
    assert offs == [6, 12, 22]
    assert all(str(p)[o] == "\n" for o in offs)


def test_offsets_overlap():
    assert HarbolString("aaa").offsets("aa", 5) == [0, 1]


def test_trim_spaces():
    i = HarbolString("   hello world  !  \n")
    assert len(i) == 20
    assert i.trim_spaces() == 9
    assert str(i) == "helloworld!"
    assert len(i) == 11


def test_replace_range():
    i = HarbolString("this is keks")
    i.replace_range(3, 5, "topkeks")
    assert str(i) == "thitopkekss keks"


def test_replace_range_whole():
    i = HarbolString("this is quite a long string, I hope this works out well!")
    i.replace_range(0, 2**64 - 1, "")
    assert str(i) == ""
    assert i.is_empty()


def test_replace_range_bad_lower():
    with pytest.raises(IndexError):
        HarbolString("abc").replace_range(3, 4, "x")


def test_replace_range_inverted():
    with pytest.raises(ValueError):
        HarbolString("abcdef").replace_range(3, 1, "x")


def test_clear():
    s = HarbolString("data")
    s.clear()
    assert s.is_empty()
    assert str(s) == ""


def test_compare():
    a = HarbolString("abc")
    b = HarbolString("abd")
    assert a.compare(b) == -1
    assert b.compare(a) == 1
    assert a.compare(HarbolString("abc")) == 0
    assert a.compare("abc") == 0
    assert a.compare("abd") == 1
    assert HarbolString().compare("x") == -1


def test_palindrome():
    assert HarbolString("racecar").is_palindrome()
    assert not HarbolString("abca").is_palindrome()
    assert not HarbolString().is_palindrome()


def test_replace_char():
    s = HarbolString("a-b-c")
    assert s.replace_char("-", "+")
    assert s == "a+b+c"
    assert s.replace_char("z", "y") is False


def test_count_and_find_char():
    s = HarbolString("banana")
    assert s.count_char("a") == 3
    assert s.find_char("n") == 2
    assert s.find_char("z") == -1


def test_upper_lower():
    s = HarbolString("Hello, World 1")
    assert s.upper()
    assert s == "HELLO, WORLD 1"
    assert s.upper() is False
    assert s.lower()
    assert s == "hello, world 1"


def test_read_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("file contents\n", encoding="utf-8")
    s = HarbolString("old")
    assert s.read_file(path)
    assert s == "file contents\n"


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    s = HarbolString("old")
    assert s.read_file(path) is False
    assert s == "old"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        HarbolString().read_file(tmp_path / "missing.txt")


def test_equality():
    assert HarbolString("x") == HarbolString("x")
    assert HarbolString("x") == "x"
    assert not (HarbolString("x") == "y")


def test_add_wrong_type():
    with pytest.raises(TypeError):
        HarbolString("a").add(5)