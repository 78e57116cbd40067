from bpe_pairs.base import PairKey, count_pairs

def test_count_pairs():
    assert count_pairs("abcab") == {
        PairKey("a", "b"): 2,
        PairKey("b", "c"): 1,
        PairKey("c", "a"): 1,
    }

def test_count_pairs_degenerate_input():
    assert count_pairs("") == {}
    assert count_pairs("x") == {}

def test_pair_key_is_structural():
    assert PairKey("a", "t") == PairKey("a", "t")
    assert PairKey("a", "t") != PairKey("t", "a")
    assert hash(PairKey("a", "t")) == hash(("a", "t"))
    assert {PairKey("a", "t"): 1}[("a", "t")] == 1
