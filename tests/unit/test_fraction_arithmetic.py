"""
Тесты для арифметики Fraction

Проверяет:
1. Конструирование и нормализацию
2. Сложение, вычитание, умножение, деление, отрицание
3. Деление на ноль и нулевой знаменатель
4. Переполнение (никогда не wraparound)
5. Смешанную арифметику с int и отказ для float / других ширин
6. Сравнение и хеширование
7. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from fractionkit import (
    DivisionByZeroError,
    Fraction,
    Fraction8,
    Fraction16,
    Fraction32,
    Fraction64,
    FractionOverflowError,
    InvalidFractionError,
    fraction,
    from_integer,
)
from fractionkit.core.math.checked_int import INT32

INT32_MAX = INT32.max_value
INT32_MIN = INT32.min_value


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты конструирования дробей"""

    def test_reduces_on_construction(self) -> None:
        """18/512 → 9/256"""
        assert fraction(18, 512) == fraction(9, 256)
        assert fraction(18, 512).as_tuple() == (9, 256)

    def test_sign_transferred_to_numerator(self) -> None:
        assert fraction(1, -5) == fraction(-1, 5)
        assert fraction(1, -5).denominator == 5

    def test_zero_is_canonical(self) -> None:
        assert fraction(0, -7).as_tuple() == (0, 1)

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(InvalidFractionError):
            fraction(1, 0)

    def test_keyword_construction(self) -> None:
        assert Fraction(numerator=2, denominator=4).as_tuple() == (1, 2)

    def test_default_denominator(self) -> None:
        assert Fraction(5).as_tuple() == (5, 1)

    def test_from_integer(self) -> None:
        assert from_integer(-7).as_tuple() == (-7, 1)
        assert Fraction64.from_integer(2**40).as_tuple() == (2**40, 1)

    def test_from_integer_out_of_range(self) -> None:
        with pytest.raises(FractionOverflowError):
            Fraction8.from_integer(128)

    def test_from_integer_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            Fraction.from_integer(1.0)  # type: ignore[arg-type]

    def test_inputs_must_fit_width(self) -> None:
        """Входы вне ширины хранения отклоняются даже если сократимы"""
        with pytest.raises(FractionOverflowError):
            Fraction(2**40, 2**40)
        with pytest.raises(FractionOverflowError):
            Fraction8(200, 2)

    def test_negating_min_value_in_constructor(self) -> None:
        with pytest.raises(FractionOverflowError):
            Fraction(INT32_MIN, -1)
        assert Fraction(INT32_MIN, -2).as_tuple() == (2**30, 1)

    @pytest.mark.parametrize("numerator", [1.5, "1", True, None])
    def test_non_integer_rejected(self, numerator: object) -> None:
        """Строгие целые поля: float, str, bool отклоняются"""
        with pytest.raises(ValidationError):
            Fraction(numerator, 2)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            Fraction(1, 2, sign=-1)

    def test_denominator_default_only_positional(self) -> None:
        """Keyword и dict вход без denominator отклоняются"""
        with pytest.raises(ValidationError):
            Fraction(numerator=1)
        with pytest.raises(ValidationError):
            Fraction.model_validate({"numerator": 1})

    def test_positional_arguments_checked(self) -> None:
        with pytest.raises(TypeError):
            Fraction(1, 2, 3)  # type: ignore[call-arg]
        with pytest.raises(TypeError):
            Fraction(1, numerator=2)
        with pytest.raises(TypeError):
            Fraction(1, 2, denominator=3)

    def test_fraction32_is_default(self) -> None:
        assert Fraction32 is Fraction
        assert Fraction.WIDTH == INT32


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты четырёх арифметических операций"""

    def test_add(self) -> None:
        assert fraction(1, 2) + fraction(1, 3) == fraction(5, 6)
        assert fraction(1, 14) + fraction(3, 35) == fraction(11, 70)

    def test_add_result_reduced(self) -> None:
        result = fraction(1, 6) + fraction(1, 3)
        assert result.as_tuple() == (1, 2)

    def test_add_to_zero(self) -> None:
        assert (fraction(3, 4) + fraction(-3, 4)).as_tuple() == (0, 1)

    def test_subtract(self) -> None:
        assert fraction(1, 7) - fraction(3, 35) == fraction(2, 35)
        assert fraction(1, 3) - fraction(1, 2) == fraction(-1, 6)

    def test_multiply(self) -> None:
        assert fraction(3, 4) * fraction(2, 3) == fraction(1, 2)
        assert fraction(3, 13) * fraction(4, 11) == fraction(12, 143)

    def test_multiply_signs(self) -> None:
        assert fraction(-3, 4) * fraction(-2, 3) == fraction(1, 2)
        assert fraction(-3, 4) * fraction(2, 3) == fraction(-1, 2)

    def test_divide(self) -> None:
        assert fraction(1, 2) / fraction(1, 2) == fraction(1, 1)
        assert fraction(1, 19) / fraction(5, 8) == fraction(8, 95)

    def test_divide_by_negative_moves_sign(self) -> None:
        result = fraction(1, 2) / fraction(-3, 4)
        assert result.as_tuple() == (-2, 3)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            fraction(1, 1) / fraction(0, 5)

    def test_divide_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            fraction(3, 10) / from_integer(0)

    def test_divide_by_zero_distinct_from_invalid_fraction(self) -> None:
        with pytest.raises(DivisionByZeroError) as exc_info:
            fraction(3, 10) / 0
        assert not isinstance(exc_info.value, InvalidFractionError)

    def test_negate(self) -> None:
        assert -fraction(5, 19) == fraction(-5, 19)
        assert -fraction(-5, 19) == fraction(5, 19)
        assert (-fraction(0)).as_tuple() == (0, 1)

    def test_pos_and_abs(self) -> None:
        assert +fraction(-1, 2) == fraction(-1, 2)
        assert abs(fraction(-1, 2)) == fraction(1, 2)
        assert abs(fraction(1, 2)) == fraction(1, 2)

    def test_in_place_operators_return_new_values(self) -> None:
        original = fraction(1, 2)
        f = original
        f += fraction(1, 4)
        f *= 2
        assert f == fraction(3, 2)
        assert original == fraction(1, 2)

    def test_result_class_follows_width(self) -> None:
        result = Fraction8(1, 2) + Fraction8(1, 3)
        assert type(result) is Fraction8
        assert result == Fraction8(5, 6)


class TestMixedOperands:
    """Тесты арифметики с int и неподдерживаемыми типами"""

    def test_int_operands(self) -> None:
        assert fraction(1, 2) + 1 == fraction(3, 2)
        assert 1 + fraction(1, 2) == fraction(3, 2)
        assert 1 - fraction(1, 3) == fraction(2, 3)
        assert fraction(1, 3) - 1 == fraction(-2, 3)
        assert 3 * fraction(1, 6) == fraction(1, 2)
        assert 2 / fraction(4, 3) == fraction(3, 2)
        assert fraction(4, 3) / 2 == fraction(2, 3)

    def test_int_divided_by_zero_fraction(self) -> None:
        with pytest.raises(DivisionByZeroError):
            1 / fraction(0)

    def test_float_operand_rejected(self) -> None:
        with pytest.raises(TypeError):
            fraction(1, 2) + 0.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            0.5 * fraction(1, 2)  # type: ignore[operator]

    def test_different_widths_not_mixed(self) -> None:
        with pytest.raises(TypeError):
            Fraction(1, 2) + Fraction64(1, 2)  # type: ignore[operator]
        with pytest.raises(TypeError):
            Fraction16(1, 2) < Fraction8(1, 2)  # type: ignore[operator]

    def test_bool_operand_rejected(self) -> None:
        with pytest.raises(TypeError):
            fraction(1, 2) + True  # type: ignore[operator]


# =============================================================================
# ПЕРЕПОЛНЕНИЕ
# =============================================================================


class TestOverflow:
    """Тесты детекции переполнения"""

    def test_multiply_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            fraction(INT32_MAX) * fraction(2)

    def test_multiply_denominator_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            fraction(1, INT32_MAX) * fraction(1, 2)

    def test_add_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            fraction(INT32_MAX) + fraction(1)

    def test_subtract_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            fraction(INT32_MIN) - fraction(1)

    def test_divide_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            fraction(INT32_MAX) / fraction(1, 2)

    def test_negate_min_value_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            -fraction(INT32_MIN)

    def test_reciprocal_min_value_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            fraction(INT32_MIN).reciprocal()

    def test_int8_add_overflow(self) -> None:
        with pytest.raises(FractionOverflowError):
            Fraction8(100) + Fraction8(100)

    def test_int8_unreducible_sum_overflow(self) -> None:
        """127 + 1/127 = 16130/127 не сокращается"""
        with pytest.raises(FractionOverflowError):
            Fraction8(127) + Fraction8(1, 127)

    def test_widened_intermediate_cancels(self) -> None:
        """Промежуточное 8128/8128 не помещается в int8, но сокращается до 1"""
        assert Fraction8(64, 127) * Fraction8(127, 64) == Fraction8(1)
        assert Fraction8(100) + Fraction8(-100) == Fraction8(0)

    def test_overflow_does_not_wrap(self) -> None:
        """Результат никогда не превращается в численно неверную дробь"""
        with pytest.raises(OverflowError):
            Fraction16(32767) + Fraction16(1)

    def test_int64_intermediates(self) -> None:
        big = Fraction64(2**62, 3)
        assert big * Fraction64(3, 2**62) == Fraction64(1)
        with pytest.raises(FractionOverflowError):
            big * Fraction64(6)


# =============================================================================
# СРАВНЕНИЕ И ХЕШ
# =============================================================================


class TestComparison:
    """Тесты сравнения"""

    def test_ordering(self) -> None:
        f = fraction(3, 4)
        g = fraction(5, 6)
        assert g > f
        assert not f > g
        assert f < g
        assert f <= g
        assert g >= f

    def test_reduction_equality(self) -> None:
        assert fraction(2, 4) == fraction(1, 2)
        assert fraction(2, 4) <= fraction(1, 2)
        assert fraction(2, 4) >= fraction(1, 2)

    def test_negative_ordering(self) -> None:
        assert fraction(-1, 2) < fraction(-1, 3)
        assert fraction(-1, 2) < 0

    def test_compare_with_int(self) -> None:
        assert fraction(4, 2) == 2
        assert 2 == fraction(4, 2)
        assert fraction(3, 2) != 1
        assert fraction(3, 2) > 1
        assert 2 > fraction(3, 2)

    def test_compare_three_way(self) -> None:
        assert fraction(1, 3).compare(fraction(1, 2)) == -1
        assert fraction(1, 2).compare(fraction(2, 4)) == 0
        assert fraction(1, 2).compare(0) == 1

    def test_compare_rejects_float(self) -> None:
        with pytest.raises(TypeError):
            fraction(1, 2).compare(0.5)

    def test_exact_near_values(self) -> None:
        """Значения, неразличимые во float, сравниваются точно"""
        a = Fraction64(2**53 + 1, 2**53)
        b = Fraction64(2**53 + 2, 2**53 + 1)
        assert float(a) == float(b)
        assert b < a

    def test_sorting(self) -> None:
        values = [fraction(3, 4), fraction(-1, 2), fraction(5, 6), fraction(0)]
        assert sorted(values) == [fraction(-1, 2), fraction(0), fraction(3, 4), fraction(5, 6)]

    def test_compare_with_int_outside_width(self) -> None:
        """int вне ширины сравнивается точно, без FractionOverflowError"""
        assert fraction(1, 2) < 2**40
        assert fraction(1, 2) > -(2**40)
        assert not fraction(1, 2) >= 2**40
        assert fraction(INT32_MAX) < 2**31
        assert fraction(1, 2) != 2**40
        assert fraction(1, 2).compare(2**40) == -1
        assert Fraction8(-1, 3).compare(-(2**20)) == 1

    def test_not_equal_to_other_types(self) -> None:
        assert fraction(1, 2) != 0.5
        assert fraction(1, 2) != "1/2"
        assert Fraction(1, 2) != Fraction64(1, 2)

    def test_hash_consistent_with_eq(self) -> None:
        assert hash(fraction(2, 4)) == hash(fraction(1, 2))
        assert hash(fraction(6, 2)) == hash(3)
        assert len({fraction(1, 2), fraction(2, 4), fraction(3, 6)}) == 1
        assert {fraction(3): "three"}[3] == "three"


# =============================================================================
# IMMUTABILITY И ДОПОЛНИТЕЛЬНЫЕ СВОЙСТВА
# =============================================================================


class TestValueSemantics:
    """Тесты неизменяемости и вспомогательных методов"""

    def test_frozen(self) -> None:
        f = fraction(1, 2)
        with pytest.raises(ValidationError):
            f.numerator = 3  # type: ignore[misc]
        assert f.as_tuple() == (1, 2)

    def test_model_copy_update_is_normalized(self) -> None:
        """Обновлённые поля проходят ту же нормализацию"""
        f = fraction(1, 2)
        copy = f.model_copy(update={"numerator": 2, "denominator": 4})
        assert copy.as_tuple() == (1, 2)
        assert copy == f
        assert f.model_copy(update={"denominator": -3}).as_tuple() == (-1, 3)

    def test_model_copy_update_zero_denominator(self) -> None:
        with pytest.raises(InvalidFractionError):
            fraction(1, 2).model_copy(update={"denominator": 0})

    def test_model_copy_update_out_of_range(self) -> None:
        with pytest.raises(FractionOverflowError):
            Fraction8(1, 2).model_copy(update={"numerator": 1000})

    def test_model_copy_without_update(self) -> None:
        f = Fraction8(3, 4)
        copy = f.model_copy()
        assert type(copy) is Fraction8
        assert copy == f

    def test_as_tuple(self) -> None:
        assert fraction(7, 23).as_tuple() == (7, 23)

    def test_is_proper(self) -> None:
        assert fraction(3, 4).is_proper()
        assert fraction(-3, 4).is_proper()
        assert not fraction(10, 9).is_proper()
        assert not fraction(1).is_proper()

    def test_reciprocal(self) -> None:
        assert fraction(3, 5).reciprocal() == fraction(5, 3)
        assert fraction(-3, 5).reciprocal() == fraction(-5, 3)
        assert fraction(-3, 5).reciprocal().denominator == 3

    def test_reciprocal_of_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            from_integer(0).reciprocal()

    def test_truthiness(self) -> None:
        assert fraction(1, 2)
        assert not fraction(0, 3)
        assert fraction(0).is_zero()

    def test_is_integer(self) -> None:
        assert fraction(6, 3).is_integer()
        assert not fraction(7, 3).is_integer()
