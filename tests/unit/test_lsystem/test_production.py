"""Test: L-system production engine."""

import pytest

from plantgen.lsystem.production import ProductionEngine
from plantgen.lsystem.sequence import NIL


class TestRules:
    """Tests for grammar management."""

    def test_add_rule_last_write_wins(self) -> None:
        """Test registering a symbol twice keeps the last body."""
        engine = ProductionEngine()
        engine.add_rule("A", "AB")
        engine.add_rule("A", "BA")
        assert dict(engine.rules) == {"A": "BA"}

    def test_clear_rules(self) -> None:
        """Test clearing removes every rule."""
        engine = ProductionEngine({"A": "B", "B": "A"})
        engine.clear_rules()
        assert len(engine.rules) == 0

    def test_rules_view_is_read_only(self) -> None:
        """Test the rules view cannot be mutated."""
        engine = ProductionEngine({"A": "B"})
        with pytest.raises(TypeError):
            engine.rules["A"] = "C"  # type: ignore[index]

    def test_constructor_copies_mapping(self) -> None:
        """Test engines do not share the caller's dict."""
        rules = {"A": "B"}
        engine = ProductionEngine(rules)
        rules["A"] = "C"
        assert engine.rules["A"] == "B"

    def test_engines_are_independent(self) -> None:
        """Test two engines never share a grammar."""
        first = ProductionEngine()
        second = ProductionEngine()
        first.add_rule("A", "AA")
        assert "A" not in second.rules

    def test_any_symbol_accepted(self) -> None:
        """Test the engine does not validate keys or bodies."""
        engine = ProductionEngine()
        engine.add_rule("[", "]]")
        engine.add_rule("*", "F[+F]")
        assert str(engine.generate("*[", 1)) == "F[+F]]]"


class TestGenerate:
    """Tests for generate / expand_once."""

    @pytest.mark.parametrize("axiom", ["F", "F[+F]F", "A-B+C"])
    def test_zero_iterations_is_identity(self, axiom: str) -> None:
        """Test zero iterations returns the axiom unchanged."""
        engine = ProductionEngine({"F": "FF", "A": "B"})
        assert str(engine.generate(axiom, 0)) == axiom

    def test_single_level_substitution(self) -> None:
        """Test A -> AB gives AB, then ABB."""
        engine = ProductionEngine({"A": "AB"})
        assert str(engine.generate("A", 1)) == "AB"
        assert str(engine.generate("A", 2)) == "ABB"

    @pytest.mark.parametrize("k", range(6))
    def test_doubling_growth(self, k: int) -> None:
        """Test A -> AA yields 2**k symbols after k generations."""
        engine = ProductionEngine({"A": "AA"})
        result = engine.generate("A", k)
        assert str(result) == "A" * 2**k
        assert len(result) == 2**k

    def test_inserted_symbols_not_rescanned(self) -> None:
        """Test symbols produced in a pass are only rewritten in the next pass."""
        engine = ProductionEngine({"A": "B", "B": "C"})
        assert str(engine.generate("A", 1)) == "B"
        assert str(engine.generate("A", 2)) == "C"

    def test_symbols_without_rules_pass_through(self) -> None:
        """Test unknown symbols stay in place."""
        engine = ProductionEngine({"X": "F[-X][+X]"})
        assert str(engine.generate("FFX", 1)) == "FFF[-X][+X]"

    def test_rewrite_first_symbol_keeps_rest(self) -> None:
        """Test rewriting the head does not lose the tail."""
        engine = ProductionEngine({"A": "xy"})
        result = engine.generate("Abc", 1)
        assert str(result) == "xybc"
        assert result.value(result.head) == "x"

    def test_rewrite_last_symbol(self) -> None:
        """Test rewriting the tail leaves no dangling successor."""
        engine = ProductionEngine({"C": "xy"})
        result = engine.generate("abC", 1)
        assert str(result) == "abxy"
        assert result.next(result.tail) == NIL

    def test_empty_replacement_removes_symbol(self) -> None:
        """Test a rule to the empty string deletes the symbol."""
        engine = ProductionEngine({"X": ""})
        assert str(engine.generate("aXbX", 1)) == "ab"
        assert str(engine.generate("XXX", 1)) == ""

    def test_empty_axiom(self) -> None:
        """Test an empty axiom stays empty."""
        engine = ProductionEngine({"A": "AB"})
        result = engine.generate("", 3)
        assert len(result) == 0
        assert result.head == NIL

    def test_negative_iterations_do_nothing(self) -> None:
        """Test a negative count performs no rewriting."""
        engine = ProductionEngine({"A": "AB"})
        assert str(engine.generate("A", -2)) == "A"

    def test_expand_once_in_place(self) -> None:
        """Test expand_once mutates and returns the same sequence."""
        engine = ProductionEngine({"B": "[-F][+F]"})
        sequence = engine.parse("FB")
        assert engine.expand_once(sequence) is sequence
        assert str(sequence) == "F[-F][+F]"

    def test_preset_grammar(self) -> None:
        """Test a branching preset grammar."""
        engine = ProductionEngine({"B": "[-FBfL][+FBfL]"})
        assert str(engine.generate("FB", 2)) == "F[-F[-FBfL][+FBfL]fL][+F[-FBfL][+FBfL]fL]"

    def test_deterministic(self) -> None:
        """Test repeated runs give identical output."""
        engine = ProductionEngine({"X": "F[-FXL][+FXL]X"})
        assert str(engine.generate("FFX", 4)) == str(engine.generate("FFX", 4))

    def test_generate_leaves_no_detached_nodes(self) -> None:
        """Test the arena holds only live nodes after several generations."""
        engine = ProductionEngine({"X": "F[-FXL][+FXL]X"})
        result = engine.generate("FFX", 4)
        assert result.capacity == len(result)
