import pytest

from argkit.arguments import FlagArgument, Holder, IntArgument, StringArgument


def test_holder_starts_empty_and_keeps_value():
    holder = Holder()
    assert holder.value is None
    holder.value = 7
    assert holder.value == 7


def test_builder_methods_chain():
    arg = IntArgument("param1")
    assert arg.multi_value(2).positional() is arg
    assert arg.is_multi
    assert arg.is_positional
    assert arg.min_args_count == 2


def test_min_args_count_before_and_after_multi_value():
    arg = StringArgument("input")
    assert arg.min_args_count == 1
    assert not arg.is_multi
    arg.multi_value()
    assert arg.min_args_count == 0
    assert arg.is_multi


def test_negative_min_args_rejected():
    with pytest.raises(ValueError):
        IntArgument("n").multi_value(-1)


def test_store_value_on_multi_raises():
    arg = IntArgument("n").multi_value(1)
    with pytest.raises(ValueError, match="multi-valued value in a single"):
        arg.store_value(Holder())


def test_store_values_on_single_raises():
    arg = StringArgument("s")
    with pytest.raises(ValueError, match="single value in a multi-valued"):
        arg.store_values([])


def test_list_default_on_single_raises():
    with pytest.raises(ValueError, match="not multivalued"):
        IntArgument("n").default([1, 2])


def test_scalar_default_on_multi_raises():
    with pytest.raises(ValueError, match="single value in a multi-values"):
        StringArgument("s").multi_value().default("x")


def test_scalar_default_sets_value():
    arg = StringArgument("param1").default("value1")
    assert arg.has_default
    assert arg.value == "value1"
    assert arg.default_value == "value1"


def test_list_default_is_copied():
    defaults = [1, 2, 3]
    arg = IntArgument("n").multi_value().default(defaults)
    defaults.append(4)
    assert arg.values == [1, 2, 3]
    assert arg.default_values == [1, 2, 3]


def test_value_written_through_holder():
    holder = Holder()
    arg = StringArgument("param1").store_value(holder)
    assert arg.is_stored
    arg.value = "value1"
    assert holder.value == "value1"
    assert arg.value == "value1"


def test_values_go_to_target_list():
    collected = []
    arg = IntArgument("p").multi_value().store_values(collected)
    arg.values.append(1)
    arg.values.append(2)
    assert collected == [1, 2]
    assert arg.values is collected


def test_unstored_argument_keeps_own_value():
    arg = IntArgument("n")
    assert not arg.is_stored
    arg.value = 100500
    assert arg.value == 100500


def test_empty_values_per_type():
    assert IntArgument("n").value is None
    assert StringArgument("s").value == ""
    assert FlagArgument("f").value is False


def test_short_name_must_be_one_character():
    with pytest.raises(ValueError):
        IntArgument("n", short_name="ab")
    assert StringArgument("param1", short_name="p").short_name == "p"


def test_flag_default_and_store():
    holder = Holder()
    flag = FlagArgument("flag3", short_name="c").store_value(holder)
    flag.value = True
    assert holder.value is True
    assert flag.value is True

    other = FlagArgument("flag2").default(True)
    assert other.has_default
    assert other.value is True
    assert other.default_value is True


def test_new_argument_state_flags():
    arg = StringArgument("input", "File path for input file", short_name="i")
    assert arg.description == "File path for input file"
    assert not arg.has_default
    assert not arg.is_recorded
    assert arg.number_of_values == 0