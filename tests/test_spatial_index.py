from geo.spatial_index import GeohashTrie


def test_query_returns_drivers_under_prefix():
    trie = GeohashTrie()
    trie.insert("tdr1vz", 1)
    trie.insert("tdr1w0", 2)
    trie.insert("tdx000", 3)
    trie.insert("u4prux", 4)

    assert trie.query("tdr") == {1, 2}
    assert trie.query("td") == {1, 2, 3}
    assert trie.query("tdr1vz") == {1}
    assert trie.query("") == {1, 2, 3, 4}


def test_query_unknown_prefix_is_empty():
    trie = GeohashTrie()
    trie.insert("tdr1vz", 1)

    assert trie.query("zzz") == set()
    assert trie.query("tdr1vz0") == set()


def test_insert_is_idempotent():
    trie = GeohashTrie()
    trie.insert("tdr1vz", 7)
    nodes_after_first = len(trie)

    trie.insert("tdr1vz", 7)

    assert trie.query("tdr") == {7}
    assert len(trie) == nodes_after_first


def test_remove_only_touches_that_code():
    trie = GeohashTrie()
    trie.insert("tdr1vz", 1)
    trie.insert("tdr1vz", 2)

    trie.remove("tdr1vz", 1)

    assert trie.query("tdr1vz") == {2}


def test_remove_unknown_path_or_id_is_ignored():
    trie = GeohashTrie()
    trie.insert("tdr1vz", 1)

    trie.remove("zzzzzz", 1)
    trie.remove("tdr1vz", 99)

    assert trie.query("tdr1vz") == {1}


def test_remove_keeps_empty_nodes():
    """
    Nodes are not pruned, re-inserting reuses the same path.
    """
    trie = GeohashTrie()
    trie.insert("tdr1vz", 1)
    node_count = len(trie)

    trie.remove("tdr1vz", 1)
    assert trie.query("tdr") == set()
    assert len(trie) == node_count

    trie.insert("tdr1vz", 1)
    assert len(trie) == node_count


def test_arena_grows_one_node_per_new_character():
    trie = GeohashTrie()
    assert len(trie) == 1  # root

    trie.insert("abc", 1)
    assert len(trie) == 4

    trie.insert("abd", 2)
    assert len(trie) == 5
