from lldkit.builder import (
    BuilderType,
    Director,
    DoorType,
    House,
    IglooBuilder,
    NormalBuilder,
    WindowType,
    get_builder,
)


def test_normal_house():
    house = Director(get_builder(BuilderType.NORMAL)).build_house()
    assert house == House(WindowType.WOODEN, DoorType.WOODEN, 2)


def test_igloo_house():
    house = Director(get_builder(BuilderType.IGLOO)).build_house()
    assert house == House(WindowType.SNOW, DoorType.SNOW, 1)


def test_unknown_builder_type_falls_back_to_normal():
    builder = get_builder(7)
    assert isinstance(builder, NormalBuilder)
    assert builder.floors == 2


def test_director_switches_builder():
    director = Director(NormalBuilder())
    first = director.build_house()
    director.builder = IglooBuilder()
    second = director.build_house()
    assert first.window_type is WindowType.WOODEN
    assert second.window_type is WindowType.SNOW


def test_unbuilt_house_is_empty():
    house = NormalBuilder().get_house()
    assert house == House(None, None, 0)


def test_print_details(capsys):
    Director(IglooBuilder()).build_house().print_details()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Window Type: Snow Window",
        "DoorType Type: Snow Door",
        "Number of Floor: 1",
    ]