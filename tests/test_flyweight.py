from patternkit.flyweight import Tree, TreeFactory, TreeType, main


def test_same_attributes_share_one_instance():
    factory = TreeFactory()
    first = factory.get_tree_type("Oak", "Green", "Rough")
    second = factory.get_tree_type("Oak", "Green", "Rough")
    assert first is second
    assert len(factory.types) == 1


def test_different_attributes_give_different_types():
    factory = TreeFactory()
    oak = factory.get_tree_type("Oak", "Green", "Rough")
    pine = factory.get_tree_type("Pine", "Dark Green", "Smooth")
    assert oak is not pine
    assert len(factory.types) == 2


def test_type_created_only_once(capsys):
    factory = TreeFactory()
    for _ in range(3):
        factory.get_tree_type("Oak", "Green", "Rough")
    assert capsys.readouterr().out.count("Creating TreeType: Oak") == 1


def test_tree_draw_returns_printed_line(capsys):
    tree_type = TreeType("Oak", "Green", "Rough")
    capsys.readouterr()
    line = Tree(1, 1, tree_type).draw()
    assert line == "Drawing Oak tree at (1, 1) with color Green and texture Rough"
    assert capsys.readouterr().out == line + "\n"


def test_trees_keep_their_own_positions():
    factory = TreeFactory()
    oak = factory.get_tree_type("Oak", "Green", "Rough")
    trees = [Tree(1, 1, oak), Tree(2, 3, oak)]
    assert trees[0].tree_type is trees[1].tree_type
    assert "(2, 3)" in trees[1].draw()


def test_main_creates_two_types_and_draws_three_trees(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum(line.startswith("Creating TreeType:") for line in lines) == 2
    drawn = [line for line in lines if line.startswith("Drawing")]
    assert len(drawn) == 3
    assert "Pine" in drawn[2]