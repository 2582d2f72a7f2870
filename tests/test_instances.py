"""Tests for effects and capability instances."""

import operator

from amass import Err, Left, Ok, Ordering, Right, effects, instances, semigroup


class TestTraverse:
    def test_list_effect(self):
        assert Ok(2).traverse(lambda a: [a, a + 1], effects.LIST) == [Ok(2), Ok(3)]

    def test_failure_is_lifted_without_calling(self):
        calls = []

        def f(a):
            calls.append(a)
            return [a]

        err = Err("x")
        assert err.traverse(f, effects.LIST) == [err]
        assert calls == []

    def test_optional_effect(self):
        half = lambda n: n // 2 if n % 2 == 0 else None  # noqa: E731
        assert Ok(4).traverse(half, effects.OPTIONAL) == Ok(2)
        assert Ok(3).traverse(half, effects.OPTIONAL) is None
        assert Err("x").traverse(half, effects.OPTIONAL) == Err("x")

    def test_identity_effect_is_map(self):
        assert Ok(1).traverse(lambda a: a + 1, effects.IDENTITY) == Ok(2)

    def test_result_effect(self):
        F = effects.result_applicative(operator.add)
        assert Ok(1).traverse(lambda a: Ok(a + 1), F) == Ok(Ok(2))
        assert Ok(1).traverse(lambda a: Err(["bad"]), F) == Err(["bad"])

    def test_map2(self):
        F = effects.result_applicative(operator.add)
        assert F.map2(Err(["a"]), Err(["b"]), operator.add) == Err(["a", "b"])
        assert effects.LIST.map2([1, 2], [10], operator.add) == [11, 12]


class TestBitraverse:
    def test_populated_side_only(self):
        f = lambda e: [e.upper()]  # noqa: E731
        g = lambda a: [a, -a]  # noqa: E731
        assert Err("x").bitraverse(f, g, effects.LIST) == [Err("X")]
        assert Ok(1).bitraverse(f, g, effects.LIST) == [Ok(1), Ok(-1)]

    def test_with_plain_functor(self):
        tupled = effects.Functor(map=lambda fa, f: (fa[0], f(fa[1])))
        result = Ok(2).bitraverse(lambda e: ("err", e), lambda a: ("ok", a), tupled)
        assert result == ("ok", Ok(2))


class TestFunctorInstances:
    def test_success_side(self):
        assert instances.ResultFunctor().map(Ok(1), str) == Ok("1")

    def test_error_side(self):
        assert instances.ErrFunctor().map(Err(1), str) == Err("1")
        assert instances.ErrFunctor().map(Ok(1), str) == Ok(1)

    def test_bimap(self):
        B = instances.ResultBitraverse()
        assert B.bimap(Err(1), str, float) == Err("1")
        assert B.bitraverse(Ok(1), list, lambda a: [a], effects.LIST) == [Ok(1)]


class TestResultTraverse:
    def test_sequence(self):
        T = instances.ResultTraverse()
        assert T.sequence(Ok([1, 2]), effects.LIST) == [Ok(1), Ok(2)]
        assert T.sequence(Err("x"), effects.LIST) == [Err("x")]

    def test_cozip(self):
        T = instances.ResultTraverse()
        assert T.cozip(Err("e")) == Left(Err("e"))
        assert T.cozip(Ok(Left(1))) == Left(Ok(1))
        assert T.cozip(Ok(Right(2))) == Right(Ok(2))

    def test_pextract(self):
        T = instances.ResultTraverse()
        assert T.pextract(Ok(1)) == Right(1)
        assert T.pextract(Err("e")) == Left(Err("e"))

    def test_fold_right(self):
        T = instances.ResultTraverse()
        assert T.fold_right(Ok(1), 10, operator.add) == 11


class TestApplicativeError:
    def setup_method(self):
        self.F = instances.ResultApplicativeError(semigroup.concat)

    def test_pure_and_raise(self):
        assert self.F.pure(1) == Ok(1)
        assert self.F.raise_error(["x"]) == Err(["x"])

    def test_ap_accumulates(self):
        assert self.F.ap(Err(["b"]), Err(["a"])) == Err(["a", "b"])

    def test_handle_error(self):
        recovered = self.F.handle_error(Err(["x"]), lambda e: Ok(len(e)))
        assert recovered == Ok(1)
        ok = Ok(5)
        assert self.F.handle_error(ok, lambda e: Ok(0)) is ok

    def test_alt(self):
        assert self.F.alt(Err(["x"]), Ok(2)) == Ok(2)

    def test_as_applicative(self):
        A = self.F.as_applicative()
        assert Ok(3).traverse(lambda a: Ok(a * 2), A) == Ok(Ok(6))


class TestPlusAndMonad:
    def test_plus(self):
        P = instances.ResultPlus(semigroup.joined(","))
        assert P.plus(Err("a"), Err("b")) == Err("a,b")
        assert P.plus(Err("a"), Ok(1)) == Ok(1)

    def test_flat_map_short_circuits(self):
        M = instances.ResultMonad()
        assert M.flat_map(M.pure(1), lambda a: Ok(a + 1)) == Ok(2)
        assert M.flat_map(Err("x"), lambda a: Ok(a + 1)) == Err("x")


class TestSemigroupInstances:
    def test_result_semigroup(self):
        S = instances.ResultSemigroup(semigroup.concat, operator.add)
        assert S(Ok(1), Ok(2)) == Ok(3)
        assert S(Err(["a"]), Err(["b"])) == Err(["a", "b"])
        assert S(Err(["a"]), Ok(2)) == Ok(2)

    def test_result_monoid(self):
        M = instances.ResultMonoid(semigroup.concat, semigroup.summing)
        assert M.empty == Ok(0)
        assert M.combine_all([Ok(1), Err(["x"]), Ok(2)]) == Ok(3)
        assert M.combine_all([]) == Ok(0)

    def test_stock_semigroups(self):
        assert semigroup.first("a", "b") == "a"
        assert semigroup.last("a", "b") == "b"
        assert semigroup.union(frozenset({1}), frozenset({2})) == frozenset({1, 2})
        assert semigroup.listing().combine_all([[1], [2]]) == [1, 2]
        assert semigroup.joined("-").combine_all("a", ["b", "c"]) == "a-b-c"


class TestOrderEqualShow:
    def test_order(self):
        O = instances.ResultOrder()
        assert O.order(Err("z"), Ok(0)) == Ordering.LT
        assert O.equal(Ok(1), Ok(1))
        assert not O.equal(Ok(1), Err(1))

    def test_equal(self):
        E = instances.ResultEqual(eq_ok=lambda a, b: a.lower() == b.lower())
        assert E.equal(Ok("A"), Ok("a"))

    def test_show(self):
        S = instances.ResultShow(show_ok=str)
        assert S.show(Ok("a")) == "Ok(a)"
        assert S.show(Err("a")) == "Err('a')"


class TestAssociative:
    def test_round_trip(self):
        A = instances.ResultAssociative()
        for value in (Err("a"), Ok(Err("b")), Ok(Ok("c"))):
            assert A.reassociate_right(A.reassociate_left(value)) == value

    def test_reassociate_left(self):
        A = instances.ResultAssociative()
        assert A.reassociate_left(Err("a")) == Err(Err("a"))
        assert A.reassociate_left(Ok(Err("b"))) == Err(Ok("b"))
        assert A.reassociate_left(Ok(Ok("c"))) == Ok("c")
