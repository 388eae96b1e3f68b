from basket_mining.models.fp_tree import ROOT, FPTree, conditional_tree


def _chain(tree: FPTree, item: str):
    return [tree.nodes[index].count for index in tree.node_links(item)]


def test_build_orders_by_frequency_and_shares_prefixes(market_basket) -> None:
    tree = FPTree.build(market_basket, min_count=2)

    assert tree.item_counts == {"Bread": 4, "Milk": 4, "Diapers": 4, "Beer": 3, "Cola": 2}
    assert "Butter" not in tree.header and "Eggs" not in tree.header

    root = tree.nodes[ROOT]
    assert root.item is None and root.count == 0
    # Ties at count 4 break alphabetically: Bread, Diapers, Milk.
    assert list(root.children) == ["Bread", "Diapers"]
    bread = tree.nodes[root.children["Bread"]]
    assert bread.count == 4
    assert set(bread.children) == {"Milk", "Diapers"}


def test_node_links_follow_insertion_order(market_basket) -> None:
    tree = FPTree.build(market_basket, min_count=2)

    # Sum of every chain equals the item's global count.
    for item, count in tree.item_counts.items():
        assert sum(_chain(tree, item)) == count

    milk_nodes = list(tree.node_links("Milk"))
    assert milk_nodes == sorted(milk_nodes)
    assert tree.header["Milk"].tail == milk_nodes[-1]
    assert tree.nodes[milk_nodes[-1]].link is None


def test_prefix_paths_and_pattern_base(market_basket) -> None:
    tree = FPTree.build(market_basket, min_count=2)

    base = tree.conditional_pattern_base("Beer")
    assert sorted(base) == [
        (["Bread", "Diapers"], 1),
        (["Bread", "Diapers", "Milk"], 1),
        (["Diapers", "Milk"], 1),
    ]
    first_bread = next(tree.node_links("Bread"))
    assert tree.prefix_path(first_bread) == []
    assert tree.conditional_pattern_base("Bread") == []


def test_weighted_insert_and_conditional_tree() -> None:
    tree = FPTree.with_items({"a": 5, "b": 3})
    tree.insert(["a", "b"], 3)
    tree.insert(["a"], 2)
    assert tree.node_count == 3
    assert _chain(tree, "a") == [5]

    projected = conditional_tree([(["a", "b"], 2), (["b"], 1), (["c"], 1)], min_count=2)
    assert projected.item_counts == {"a": 2, "b": 3}
    # b outranks a in the projected ordering.
    assert list(projected.nodes[ROOT].children) == ["b"]
    assert conditional_tree([(["c"], 1)], min_count=2).is_empty()


def test_to_dict_lists_every_node(simple_baskets) -> None:
    tree = FPTree.build(simple_baskets, min_count=1)
    exported = tree.to_dict()
    assert len(exported["nodes"]) == tree.node_count
    assert len(exported["links"]) == tree.node_count - 1
    assert exported["nodes"][0] == {"id": 0, "item": "root", "count": 0, "depth": 0}
