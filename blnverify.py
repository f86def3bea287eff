#!/usr/bin/env python3
"""
BLN Verify

Checks Boolean chains emitted by an exact synthesis search.

A chain claims to compute a target function, given as a hexadecimal truth
table, from n primary inputs using k-input gates. Each chain is re-simulated
over all 2^n input assignments, compared against the target, and held to the
canonical form the search enumerates.

===============================================================================
CHAIN FILE LAYOUT
===============================================================================

Chains are stored one per block, blocks separated by blank lines. The file
for target T, fanin k and s steps is conventionally named T-k-s.bln:

    C = 0010 a b
    D = 0100 a b
    E = 1110 C D

    C = 0110 a b
    ...

Step line grammar:

    <Output> = <GateBits> <Fanin1> ... <FaninK>

  Output:    the i-th step (from 0) is named by the (n + i)-th letter of the
             alphabet, in uppercase. Primary inputs are a, b, c, ...
  GateBits:  exactly 2^k characters of 0/1. The first character is the
             value at the all-ones pattern, the last the value at pattern 0.
  Fanin:     an identifier bound earlier in the chain. Fanin j drives bit j
             of the gate's input pattern.

===============================================================================
CANONICAL FORM
===============================================================================

A chain is accepted only if every step satisfies:

  1. Normalization:  gate value at the all-zero pattern is 0.
  2. Fanin order:    fanins are non-decreasing within a step, comparing
                     letters case-insensitively.
  3. Tie-break:      a step with the same support as the previous step has
                     a gate string lexicographically >= the previous one.
  4. Colex order:    a step with a different support that does not read the
                     previous step's output has a support that is
                     colexicographically >= the previous support.

Symmetry of the target in a pair of inputs (i, j), i < j, additionally
requires that i is used before j. That rule is advisory only: it is reported
but never affects the score.

===============================================================================
SCORING
===============================================================================

Every block counts as one solution. Every failed block counts as one
violation. The score is  solutions / 2^violations.
"""

import string
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import click


class FormatError(ValueError):
    """Raised when a truth table string cannot be decoded."""
    pass


class ValidationError(Exception):
    """Raised when invocation parameters fail validation."""
    pass


class ChainViolation(Exception):
    """Raised inside a verification pass at the first broken rule."""

    def __init__(self, violation: 'Violation'):
        super().__init__(violation.describe())
        self.violation = violation


class ViolationKind(Enum):
    """Why a chain was rejected."""
    FORMAT = "format"
    STRUCTURAL = "structural"
    ORDERING = "ordering"
    NORMALIZATION = "normalization"
    EQUIVALENCE = "equivalence"


@dataclass(frozen=True)
class Violation:
    """First rule a chain broke, with the offending step line if any."""
    kind: ViolationKind
    message: str
    line: Optional[str] = None

    def describe(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} in {self.line}"


@dataclass(frozen=True)
class SymmetryAdvisory:
    """The second input is used before the first although the target is symmetric in both."""
    first: int
    second: int

    @property
    def message(self) -> str:
        return f"symmetry property violated in {self.first} and {self.second}"


# ═══════════════════════════════════════════════════════════════════════════════
# TRUTH TABLES
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(eq=False)
class BitFunction:
    """
    Boolean function of a fixed number of variables, stored as 2^n bits.

    Bit i holds the value at the assignment where variable k takes bit k
    of i. The bits live in a single Python integer, so bit 0 is the least
    significant one.
    """
    num_vars: int
    bits: int = 0

    def __post_init__(self):
        if self.num_vars < 0:
            raise ValueError("Number of variables must be non-negative")
        if self.bits < 0 or self.bits > self._mask:
            raise ValueError(f"Bits do not fit {self.num_vars} variable(s)")

    @property
    def num_bits(self) -> int:
        return 1 << self.num_vars

    @property
    def _mask(self) -> int:
        return (1 << self.num_bits) - 1

    # ───────────────────────────────────────────────────────────────────────────
    # Construction
    # ───────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_hex(cls, num_vars: int, hex_string: str) -> 'BitFunction':
        """
        Decode a big-endian hex string.

        One digit covers four bits, so 0-, 1- and 2-variable functions all
        take exactly one digit; the unused high bits are dropped.
        """
        text = hex_string.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        expected = max(1, (1 << num_vars) // 4)
        if len(text) != expected:
            raise FormatError(
                f"Expected {expected} hex digit(s) for {num_vars} variable(s), got {len(text)}"
            )
        for i, ch in enumerate(text):
            if ch not in string.hexdigits:
                raise FormatError(f"Invalid hex digit {ch!r} at position {i}")
        tt = cls(num_vars)
        tt.bits = int(text, 16) & tt._mask
        return tt

    @classmethod
    def from_binary(cls, num_vars: int, bit_string: str) -> 'BitFunction':
        """Decode a 0/1 string, highest bit index first."""
        expected = 1 << num_vars
        if len(bit_string) != expected:
            raise FormatError(
                f"Expected {expected} binary digit(s) for {num_vars} variable(s), got {len(bit_string)}"
            )
        for i, ch in enumerate(bit_string):
            if ch not in "01":
                raise FormatError(f"Invalid binary digit {ch!r} at position {i}")
        return cls(num_vars, int(bit_string, 2))

    @classmethod
    def projection(cls, num_vars: int, index: int) -> 'BitFunction':
        """The function that equals input variable `index`."""
        if not 0 <= index < num_vars:
            raise ValueError(f"Variable {index} out of range for {num_vars} variable(s)")
        return cls(num_vars, _var_mask(num_vars, index))

    def construct(self) -> 'BitFunction':
        """Fresh all-zero function of the same arity."""
        return BitFunction(self.num_vars)

    # ───────────────────────────────────────────────────────────────────────────
    # Bit access
    # ───────────────────────────────────────────────────────────────────────────

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self.num_bits:
            raise IndexError(f"Bit {i} out of range for {self.num_vars} variable(s)")

    def get_bit(self, i: int) -> int:
        self._check_index(i)
        return (self.bits >> i) & 1

    def set_bit(self, i: int) -> None:
        self._check_index(i)
        self.bits |= 1 << i

    def clear_bit(self, i: int) -> None:
        self._check_index(i)
        self.bits &= ~(1 << i)

    def count_ones(self) -> int:
        return self.bits.bit_count()

    # ───────────────────────────────────────────────────────────────────────────
    # Comparison
    # ───────────────────────────────────────────────────────────────────────────

    def _require_same_arity(self, other: 'BitFunction') -> None:
        if self.num_vars != other.num_vars:
            raise ValueError(
                f"Arity mismatch: {self.num_vars} vs {other.num_vars} variable(s)"
            )

    def equals(self, other: 'BitFunction') -> bool:
        self._require_same_arity(other)
        return self.bits == other.bits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitFunction):
            return NotImplemented
        return self.equals(other)

    def implies(self, other: 'BitFunction') -> bool:
        """True if every assignment that sets self also sets other."""
        self._require_same_arity(other)
        return self.bits & ~other.bits & self._mask == 0

    # ───────────────────────────────────────────────────────────────────────────
    # Cofactors and symmetry
    # ───────────────────────────────────────────────────────────────────────────

    def cofactor0(self, var: int) -> 'BitFunction':
        """Same-arity function with variable `var` fixed to 0."""
        mask = _var_mask(self.num_vars, var)
        low = self.bits & ~mask & self._mask
        return BitFunction(self.num_vars, low | (low << (1 << var)))

    def cofactor1(self, var: int) -> 'BitFunction':
        """Same-arity function with variable `var` fixed to 1."""
        mask = _var_mask(self.num_vars, var)
        high = self.bits & mask
        return BitFunction(self.num_vars, high | (high >> (1 << var)))

    def is_symmetric_in(self, i: int, j: int) -> bool:
        """
        True if swapping variables i and j leaves the function unchanged.

        Only the mixed cofactors can differ under the swap, so f(xi=1, xj=0)
        and f(xi=0, xj=1) must imply each other.
        """
        if i == j:
            return True
        f10 = self.cofactor1(i).cofactor0(j)
        f01 = self.cofactor0(i).cofactor1(j)
        return f10.implies(f01) and f01.implies(f10)

    # ───────────────────────────────────────────────────────────────────────────
    # Encoding
    # ───────────────────────────────────────────────────────────────────────────

    def to_hex(self) -> str:
        digits = max(1, self.num_bits // 4)
        return f"{self.bits:0{digits}x}"

    def to_binary(self) -> str:
        return f"{self.bits:0{self.num_bits}b}"

    def __str__(self) -> str:
        return self.to_binary()

    def __repr__(self) -> str:
        return f"BitFunction(num_vars={self.num_vars}, hex={self.to_hex()!r})"


def _var_mask(num_vars: int, var: int) -> int:
    """Bits of a num_vars truth table at which variable `var` is 1."""
    if not 0 <= var < num_vars:
        raise ValueError(f"Variable {var} out of range for {num_vars} variable(s)")
    mask = 0
    for i in range(1 << num_vars):
        if (i >> var) & 1:
            mask |= 1 << i
    return mask


# ═══════════════════════════════════════════════════════════════════════════════
# IDENTIFIERS AND ENVIRONMENT
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, order=True)
class Identifier:
    """
    A signal in a chain: a primary input or the output of a step.

    Signals are numbered by alphabet position. Primary inputs take indices
    0..n-1 and display in lowercase; step outputs follow from n and display
    in uppercase. Comparing indices is comparing letters case-insensitively.
    """
    index: int
    num_vars: int = field(compare=False)

    @property
    def is_input(self) -> bool:
        return self.index < self.num_vars

    @property
    def letter(self) -> str:
        if self.is_input:
            return string.ascii_lowercase[self.index]
        return string.ascii_uppercase[self.index]

    @classmethod
    def from_letter(cls, letter: str, num_vars: int) -> 'Identifier':
        """Identifier at the letter's alphabet position, ignoring case."""
        if len(letter) != 1:
            raise ValueError(f"Not an identifier: {letter!r}")
        position = string.ascii_lowercase.find(letter.lower())
        if position < 0:
            raise ValueError(f"Not an identifier: {letter!r}")
        return cls(position, num_vars)

    def __str__(self) -> str:
        return self.letter


class VariableEnvironment:
    """
    Append-only table of signal values for one verification pass.

    Starts with the projections of the primary inputs; each evaluated step
    binds its output once.
    """

    def __init__(self, num_vars: int):
        self.num_vars = num_vars
        self._tables: Dict[Identifier, BitFunction] = {}
        for i in range(num_vars):
            self._tables[Identifier(i, num_vars)] = BitFunction.projection(num_vars, i)

    def step_output(self, step_index: int) -> Identifier:
        return Identifier(self.num_vars + step_index, self.num_vars)

    def is_bound(self, letter: str) -> bool:
        """True if `letter`, with its exact case, names a bound signal."""
        try:
            ident = Identifier.from_letter(letter, self.num_vars)
        except ValueError:
            return False
        return ident.letter == letter and ident in self._tables

    def bind(self, ident: Identifier, value: BitFunction) -> None:
        if ident in self._tables:
            raise KeyError(f"Signal {ident} is already bound")
        if value.num_vars != self.num_vars:
            raise ValueError(
                f"Signal {ident} has {value.num_vars} variable(s), expected {self.num_vars}"
            )
        self._tables[ident] = value

    def lookup(self, ident: Identifier) -> BitFunction:
        return self._tables[ident]

    def __contains__(self, ident: Identifier) -> bool:
        return ident in self._tables

    def __len__(self) -> int:
        return len(self._tables)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ChainSpec:
    """
    The invocation parameters shared by every chain of one run.

    The decoded target is computed once and only ever read afterwards.
    """
    num_vars: int
    target_hex: str
    fanin: int
    steps: int
    target: BitFunction = field(init=False, repr=False, compare=False)

    EXTENSION = "bln"

    def __post_init__(self):
        if self.num_vars < 1:
            raise ValidationError("Number of variables must be positive")
        if self.fanin < 1:
            raise ValidationError("Fanin must be positive")
        if self.steps < 1:
            raise ValidationError("Number of steps must be positive")
        if self.num_vars + self.steps > len(string.ascii_lowercase):
            raise ValidationError(
                f"{self.num_vars} variable(s) and {self.steps} step(s) exceed "
                f"{len(string.ascii_lowercase)} signal names"
            )
        try:
            target = BitFunction.from_hex(self.num_vars, self.target_hex)
        except FormatError as e:
            raise ValidationError(f"Invalid target truth table {self.target_hex!r}: {e}") from e
        object.__setattr__(self, 'target', target)

    @property
    def gate_length(self) -> int:
        return 1 << self.fanin

    @property
    def default_filename(self) -> str:
        return f"{self.target_hex}-{self.fanin}-{self.steps}.{self.EXTENSION}"


# ═══════════════════════════════════════════════════════════════════════════════
# PARSING AND CANONICITY
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Step:
    """One parsed gate definition."""
    output: Identifier
    gate: BitFunction
    gate_text: str
    fanins: Tuple[Identifier, ...]

    @property
    def support(self) -> Tuple[Identifier, ...]:
        return self.fanins


def _structural(message: str, line: str) -> ChainViolation:
    return ChainViolation(Violation(ViolationKind.STRUCTURAL, message, line))


def _ordering(message: str, line: str) -> ChainViolation:
    return ChainViolation(Violation(ViolationKind.ORDERING, message, line))


class CanonicityChecker:
    """
    Ordering rules between a step and the step before it.

    One checker follows one chain; feed it every step in order.
    """

    def __init__(self):
        self._previous: Optional[Step] = None

    @staticmethod
    def _colex_key(support: Tuple[Identifier, ...]) -> Tuple[int, ...]:
        return tuple(ident.index for ident in reversed(support))

    def check(self, step: Step, line: str) -> None:
        previous = self._previous
        previous_support: Tuple[Identifier, ...] = previous.support if previous else ()

        if step.support == previous_support:
            if step.gate_text < previous.gate_text:
                raise _ordering("gates with same support are not ordered", line)
        elif (
            previous is not None
            and previous.output not in step.support
            and self._colex_key(step.support) < self._colex_key(previous_support)
        ):
            raise _ordering("co-lexicographic order violated", line)

        self._previous = step


class ChainParser:
    """
    Turns step lines into Step records.

    Rules are checked in a fixed order and the first failure raises
    ChainViolation. When a checker is attached, canonicity is checked after
    the fanins are read and before trailing characters are rejected.
    """

    SEPARATOR = " = "

    def __init__(self, num_vars: int, fanin: int,
                 checker: Optional[CanonicityChecker] = None):
        self.num_vars = num_vars
        self.fanin = fanin
        self.checker = checker

    def parse_step(self, line: str, expected: Identifier,
                   env: VariableEnvironment) -> Step:
        if not line or line[0] != expected.letter:
            raise _structural("invalid step", line)
        pos = 1

        if line[pos:pos + len(self.SEPARATOR)] != self.SEPARATOR:
            raise _structural("mal-formed step", line)
        pos += len(self.SEPARATOR)

        gate_length = 1 << self.fanin
        gate_text = line[pos:pos + gate_length]
        if len(gate_text) != gate_length:
            raise _structural("mal-formed step", line)
        pos += gate_length
        try:
            gate = BitFunction.from_binary(self.fanin, gate_text)
        except FormatError as e:
            raise ChainViolation(Violation(ViolationKind.FORMAT, str(e), line)) from e

        if gate.get_bit(0):
            raise ChainViolation(
                Violation(ViolationKind.NORMALIZATION, "gate is not normalized", line)
            )

        fanins: List[Identifier] = []
        last_index = 0
        for _ in range(self.fanin):
            if line[pos:pos + 1] != " " or pos + 1 >= len(line):
                raise _structural("mal-formed step", line)
            letter = line[pos + 1]
            pos += 2

            try:
                ident = Identifier.from_letter(letter, self.num_vars)
            except ValueError:
                raise _structural("fanin is not defined", line)
            if ident.index < last_index:
                raise _ordering("fanins are in wrong order", line)
            last_index = ident.index

            if not env.is_bound(letter):
                raise _structural("fanin is not defined", line)
            fanins.append(ident)

        step = Step(output=expected, gate=gate, gate_text=gate_text, fanins=tuple(fanins))

        if self.checker is not None:
            self.checker.check(step, line)

        if pos != len(line):
            raise _structural("mal-formed step", line)

        return step


# ═══════════════════════════════════════════════════════════════════════════════
# EVALUATION
# ═══════════════════════════════════════════════════════════════════════════════

class ChainEvaluator:
    """Simulates steps over the full input space of the target."""

    def __init__(self, target: BitFunction):
        self.target = target

    def evaluate_step(self, step: Step, env: VariableEnvironment) -> BitFunction:
        """Output of one step at every global assignment."""
        fanin_tables = [env.lookup(ident) for ident in step.fanins]
        result = self.target.construct()
        for i in range(result.num_bits):
            pattern = 0
            for j, table in enumerate(fanin_tables):
                pattern |= table.get_bit(i) << j
            if step.gate.get_bit(pattern):
                result.set_bit(i)
        return result

    def evaluate(self, steps: Sequence[Step]) -> VariableEnvironment:
        """Evaluate a whole chain into a fresh environment."""
        env = VariableEnvironment(self.target.num_vars)
        for step in steps:
            env.bind(step.output, self.evaluate_step(step, env))
        return env

    def check_output(self, function: BitFunction) -> None:
        if not function.equals(self.target):
            raise ChainViolation(
                Violation(ViolationKind.EQUIVALENCE, "chain does not compute target")
            )


class SymmetryAuditor:
    """
    Flags chains that introduce symmetric inputs out of order.

    Symmetric pairs of the target are found once and shared, read-only,
    by every audit.
    """

    def __init__(self, target: BitFunction):
        self.target = target
        self.symmetric_pairs: Tuple[Tuple[int, int], ...] = tuple(
            (i, j)
            for j in range(1, target.num_vars)
            for i in range(j)
            if target.is_symmetric_in(i, j)
        )

    def audit(self, supports: Sequence[Identifier]) -> Tuple[SymmetryAdvisory, ...]:
        order = [ident.index for ident in supports]

        def first_use(index: int) -> int:
            return order.index(index) if index in order else len(order)

        return tuple(
            SymmetryAdvisory(i, j)
            for i, j in self.symmetric_pairs
            if first_use(j) < first_use(i)
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VERIFICATION
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class VerificationResult:
    """Outcome of verifying one chain."""
    passed: bool
    violation: Optional[Violation] = None
    supports: Tuple[Identifier, ...] = ()
    steps: Tuple[Step, ...] = ()
    advisories: Tuple[SymmetryAdvisory, ...] = ()

    @property
    def ok(self) -> bool:
        return self.passed

    @property
    def failure_kind(self) -> Optional[ViolationKind]:
        return self.violation.kind if self.violation else None


class ChainVerifier:
    """
    Verifies chains against one ChainSpec.

    Each call to verify() owns its own environment, parser and checker,
    so one verifier can serve several threads.
    """

    def __init__(self, spec: ChainSpec):
        self.spec = spec
        self.evaluator = ChainEvaluator(spec.target)
        self.auditor = SymmetryAuditor(spec.target)

    def verify(self, lines: Sequence[str]) -> VerificationResult:
        lines = [line.strip() for line in lines]
        env = VariableEnvironment(self.spec.num_vars)
        parser = ChainParser(self.spec.num_vars, self.spec.fanin, CanonicityChecker())
        steps: List[Step] = []
        supports: List[Identifier] = []

        try:
            if len(lines) != self.spec.steps:
                raise ChainViolation(Violation(
                    ViolationKind.STRUCTURAL,
                    f"chain has {len(lines)} step(s), expected {self.spec.steps}",
                ))

            for index, line in enumerate(lines):
                step = parser.parse_step(line, env.step_output(index), env)
                env.bind(step.output, self.evaluator.evaluate_step(step, env))
                steps.append(step)
                supports.extend(step.support)

            self.evaluator.check_output(env.lookup(steps[-1].output))
        except ChainViolation as e:
            return VerificationResult(
                passed=False,
                violation=e.violation,
                supports=tuple(supports),
                steps=tuple(steps),
            )

        return VerificationResult(
            passed=True,
            supports=tuple(supports),
            steps=tuple(steps),
            advisories=self.auditor.audit(supports),
        )


def verify_chain(spec: ChainSpec, lines: Sequence[str]) -> VerificationResult:
    return ChainVerifier(spec).verify(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# SCORING
# ═══════════════════════════════════════════════════════════════════════════════

def iter_blocks(lines: Iterable[str]) -> Iterator[List[str]]:
    """Group trimmed non-empty lines into blank-line separated blocks."""
    block: List[str] = []
    for raw in lines:
        line = raw.strip()
        if line:
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


@dataclass
class AggregateScore:
    """Running tally over a chain file."""
    points: int = 0
    violations: int = 0
    results: List[VerificationResult] = field(default_factory=list)

    def record(self, result: VerificationResult) -> None:
        self.points += 1
        if not result.passed:
            self.violations += 1
        self.results.append(result)

    @property
    def score(self) -> float:
        """Each violation halves the score."""
        return self.points / (1 << self.violations)

    def summary_lines(self) -> List[str]:
        return [
            f"[i] violations = {self.violations}",
            f"[i] solutions = {self.points}",
            f"[i] points = {self.score}",
        ]


class ScoreAggregator:
    """Verifies every chain block of a run and tallies the score."""

    def __init__(self, spec: ChainSpec):
        self.spec = spec
        self.verifier = ChainVerifier(spec)

    def run(self, blocks: Iterable[Sequence[str]], jobs: int = 1) -> AggregateScore:
        """
        Verify all blocks, in file order.

        With jobs > 1 the chains are verified on a thread pool; results are
        still recorded in file order.
        """
        if jobs < 1:
            raise ValueError("jobs must be positive")

        total = AggregateScore()
        if jobs == 1:
            for block in blocks:
                total.record(self.verifier.verify(block))
            return total

        with ThreadPoolExecutor(max_workers=jobs) as executor:
            for result in executor.map(self.verifier.verify, blocks):
                total.record(result)
        return total


def verify_file(spec: ChainSpec, path: Optional[str] = None, jobs: int = 1) -> AggregateScore:
    """Verify the chain file at `path`, or the conventional file for `spec`."""
    with open(path or spec.default_filename, encoding='utf-8') as f:
        return ScoreAggregator(spec).run(iter_blocks(f), jobs=jobs)


# ═══════════════════════════════════════════════════════════════════════════════
# ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════

@click.command()
@click.argument('num_vars', type=int)
@click.argument('hex_tt')
@click.argument('fanin', type=int)
@click.argument('steps', type=int)
@click.option('-i', '--input', 'input_path', type=click.Path(dir_okay=False),
              default=None,
              help='Chain file (default: <HEX_TT>-<FANIN>-<STEPS>.bln)')
@click.option('-j', '--jobs', default=1, type=click.IntRange(min=1),
              help='Worker threads used to verify chains')
@click.option('--verbose', is_flag=True,
              help='Report why each rejected chain failed')
def main(num_vars: int, hex_tt: str, fanin: int, steps: int,
         input_path: Optional[str], jobs: int, verbose: bool):
    """
    BLN Verify - check synthesized chains for a target truth table.

    Reads the chains for NUM_VARS inputs, target HEX_TT, gates of FANIN
    inputs and STEPS steps, and prints the violation count, the solution
    count and the resulting score.
    """
    try:
        spec = ChainSpec(num_vars=num_vars, target_hex=hex_tt, fanin=fanin, steps=steps)
    except ValidationError as e:
        click.echo(f"[e] {e}", err=True)
        raise SystemExit(1)

    path = input_path or spec.default_filename
    try:
        total = verify_file(spec, path, jobs=jobs)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"[e] cannot read chain file {path}: {e}", err=True)
        raise SystemExit(1)

    for result in total.results:
        if verbose and result.violation is not None:
            click.echo(f"[e] {result.violation.describe()}", err=True)
        for advisory in result.advisories:
            click.echo(advisory.message)

    for line in total.summary_lines():
        click.echo(line)


if __name__ == "__main__":
    main()
