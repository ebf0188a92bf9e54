"""Register virtual machine that runs IR blocks."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

from synce.engine import IRBlock, OpCode

REGISTER_COUNT = 16


class VM:
    """Executes IR blocks over sixteen integer registers."""

    def __init__(self) -> None:
        self._registers: List[int] = [0] * REGISTER_COUNT
        self._ir = IRBlock()
        self._lock = threading.Lock()

    @property
    def registers(self) -> Tuple[int, ...]:
        return tuple(self._registers)

    @property
    def block(self) -> IRBlock:
        return self._ir

    def load(self, block: IRBlock) -> None:
        """Set the block to run."""
        self._ir = block.copy()

    def _check(self, index: int) -> int:
        if not 0 <= index < REGISTER_COUNT:
            raise IndexError(f"register {index} out of range")
        return index

    def execute(self) -> List[int]:
        """Run the loaded block, printing and returning each printed value."""
        printed: List[int] = []
        for instr in self._ir.instructions:
            if instr.op is OpCode.LOAD:
                self._registers[self._check(instr.arg1)] = instr.arg2
            elif instr.op is OpCode.PRINT:
                value = self._registers[self._check(instr.arg1)]
                print(f"VM OUT: {value}")
                printed.append(value)
        return printed

    def _locked_execute(self) -> List[int]:
        with self._lock:
            return self.execute()

    def execute_async(self) -> List[int]:
        """Run the block on a worker thread under the lock and wait for it."""
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(self._locked_execute).result()

    def hot_swap(self, block: IRBlock) -> None:
        """Replace the loaded block, waiting for any locked run to finish."""
        with self._lock:
            self._ir = block.copy()