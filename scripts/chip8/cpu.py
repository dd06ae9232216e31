import math
import random

from .errors import (
    ConfigurationError, RomError, StackOverflowError, StackUnderflowError, UnknownOpcodeError
)
from .log import asm, log, warn
from .opcodes import Op, decode, disassemble, fetch
from .settings import (
    C8_FONTS, CLOCK_RATE, FONT_BYTES, FONT_WIDTH, KEY_COUNT, ROM_START_ADDRESS, STACK_SIZE, TIMER_RATE
)


# ******************** CPU SECTION
class Cpu:
    def __init__(self, clock_rate=CLOCK_RATE, ignore_unknown_instructions=False, program_address=ROM_START_ADDRESS):
        if clock_rate <= 0:
            raise ConfigurationError(f"clock rate must be > 0, got {clock_rate}")
        if program_address < 0:
            raise ConfigurationError(f"program address must be >= 0, got {program_address}")
        log(f"Initializing processor with {clock_rate} Hz")
        # program
        self.opcode = 0x0000
        self.pc = 0
        # registers
        self.v_regs = [0] * 16
        self.idx = 0                # I register, specify where the sprites reside in memory
        # timers, each paired with a float accumulator for sub-step precision
        self.delay_timer = 0
        self.delay_timer_f = 0.0
        self.sound_timer = 0
        self.sound_timer_f = 0.0
        # stack, sp points to the topmost occupied slot and 0 means empty
        self.stack = [0] * STACK_SIZE
        self.sp = 0
        # configuration
        self.clock_rate = clock_rate
        self.ignore_unknown_instructions = ignore_unknown_instructions
        self.program_address = program_address
        self.instructions = {
            Op.CLS: self._clear_screen,
            Op.RET: self._return,
            Op.JP: self._jump,
            Op.CALL: self._call_addr,
            Op.SE_VX_KK: self._skip_if_eq,
            Op.SNE_VX_KK: self._skip_if_not_eq,
            Op.SE_VX_VY: self._skip_if_eq_regs,
            Op.LD_VX_KK: self._set_vk,
            Op.ADD_VX_KK: self._add_to_vk,
            Op.LD_VX_VY: self._set_vx_to_vy,
            Op.OR: self._set_vx_or_vy,
            Op.AND: self._set_vx_and_vy,
            Op.XOR: self._set_vx_xor_vy,
            Op.ADD_VX_VY: self._add_vx_vy,
            Op.SUB: self._sub_vx_vy,
            Op.SHR: self._shr,
            Op.SUBN: self._subn_vx_vy,
            Op.SHL: self._shl,
            Op.SNE_VX_VY: self._skip_if_not_eq_regs,
            Op.LD_I: self._set_idx,
            Op.JP_V0: self._jump_plus,
            Op.RND: self._random_byte_and,
            Op.DRW: self._to_screen,
            Op.SKP: self._skip_if_pressed,
            Op.SKNP: self._skip_if_not_pressed,
            Op.LD_VX_DT: self._set_vx_dt,
            Op.LD_VX_K: self._wait_keypress,
            Op.LD_DT_VX: self._set_dt_vx,
            Op.LD_ST_VX: self._set_st,
            Op.ADD_I_VX: self._add_to_idx,
            Op.LD_F_VX: self._select_char,
            Op.LD_B_VX: self._bcd_repr,
            Op.LD_I_VX: self._store_vregs,
            Op.LD_VX_I: self._load_vregs,
        }

    def __str__(self):
        registers = " ".join(f"V{i:X}:{v:02x}" for i, v in enumerate(self.v_regs))
        return (
            f"OPCODE:0x{self.opcode:04x} {disassemble(self.opcode)} | PC_REGISTER:0x{self.pc:03x} | "
            f"IDX_REGISTER:0x{self.idx:03x} | DT:{self.delay_timer} | ST:{self.sound_timer}\n"
            f"VARIABLE_REGISTERS:{registers}\n"
            f"STACK:{self.stack} | SP:{self.sp}"
        )

    def get_clock_rate(self):
        return self.clock_rate

    def print_debug_info(self):
        print(self)

    def load_rom(self, memory, rom_reader):
        """
        clear memory, copy the font at 0x000 and the ROM read from rom_reader at the program address
        return the number of ROM bytes loaded
        """
        memory.clear()
        if FONT_BYTES > memory.size():
            raise RomError(f"Font size ({FONT_BYTES} bytes) is larger than available memory ({memory.size()} bytes)")
        log(f"Copying font ({FONT_BYTES} bytes) to memory at 0x000")
        memory.load(0x000, C8_FONTS)

        try:
            rom = rom_reader.read()
        except OSError as e:
            raise RomError(f"ROM could not be read: {e}") from e

        available = memory.size() - self.program_address
        if len(rom) < 2:
            raise RomError(f"ROM does not contain any instructions ({len(rom)} bytes)")
        if len(rom) > available:
            raise RomError(f"ROM size ({len(rom)} bytes) is larger than available program memory ({max(available, 0)} bytes)")
        log(f"Copying ROM ({len(rom)} bytes) to memory at 0x{self.program_address:X}")
        memory.load(self.program_address, rom)

        self.pc = self.program_address
        return len(rom)

    def step(self, delta_time, memory, keypad, display, speaker, debug_cpu=False, debug_memory=False):
        """fetch, decode and execute one opcode, then let delta_time milliseconds elapse on the timers"""
        self.opcode = fetch(memory, self.pc)
        if debug_cpu:
            self.print_debug_info()
        if debug_memory:
            memory.print_debug_info()

        self.execute(decode(self.opcode), memory, keypad, display)

        self.update_delay_timer(delta_time)
        self.update_sound_timer(delta_time, speaker)

    @asm(disassemble)
    def execute(self, instruction, memory, keypad, display):
        handler = self.instructions.get(instruction.op)
        if handler is None:
            # SYS is intentionally not implemented, it is handled like any unknown opcode
            error = UnknownOpcodeError(instruction.opcode, self.pc)
            if not self.ignore_unknown_instructions:
                raise error
            warn(error)     # pc stays put, the step stalls on this instruction
            return
        handler(instruction, memory=memory, keypad=keypad, display=display)

    # ********** TIMERS
    @staticmethod
    def _timer_units(delta_time):
        return delta_time * TIMER_RATE / 1000.0

    def update_delay_timer(self, delta_time):
        if self.delay_timer_f > 0.0:
            self.delay_timer_f = max(self.delay_timer_f - self._timer_units(delta_time), 0.0)
            self.delay_timer = math.floor(self.delay_timer_f)

    def update_sound_timer(self, delta_time, speaker):
        if self.sound_timer_f > 0.0:
            self.sound_timer_f = max(self.sound_timer_f - self._timer_units(delta_time), 0.0)
            self.sound_timer = math.ceil(self.sound_timer_f)
            if self.sound_timer == 0:
                speaker.queue_beep()

    # ********** INSTRUCTIONS
    def _goto_next_instruction(self):
        self.pc += 0x2

    def _skip_next_instruction_if(self, condition):
        self.pc += 0x4 if condition else 0x2

    def _clear_screen(self, ins, display, **_):
        display.clear()
        self._goto_next_instruction()

    def _return(self, ins, **_):
        """return from a subroutine"""
        if self.sp == 0:
            raise StackUnderflowError(self.pc)
        self.pc = self.stack[self.sp]
        self.sp -= 1
        self._goto_next_instruction()

    def _jump(self, ins, **_):
        self.pc = ins.nnn

    def _call_addr(self, ins, **_):
        """push the current pc, RET adds 2 to it after popping"""
        if self.sp >= STACK_SIZE - 1:
            raise StackOverflowError(self.pc, STACK_SIZE - 1)
        self.sp += 1
        self.stack[self.sp] = self.pc
        self.pc = ins.nnn

    def _skip_if_eq(self, ins, **_):
        self._skip_next_instruction_if(self.v_regs[ins.x] == ins.kk)

    def _skip_if_not_eq(self, ins, **_):
        self._skip_next_instruction_if(self.v_regs[ins.x] != ins.kk)

    def _skip_if_eq_regs(self, ins, **_):
        self._skip_next_instruction_if(self.v_regs[ins.x] == self.v_regs[ins.y])

    def _skip_if_not_eq_regs(self, ins, **_):
        self._skip_next_instruction_if(self.v_regs[ins.x] != self.v_regs[ins.y])

    def _set_vk(self, ins, **_):
        self.v_regs[ins.x] = ins.kk
        self._goto_next_instruction()

    def _add_to_vk(self, ins, **_):
        """add kk to Vx, no carry flag"""
        self.v_regs[ins.x] = (self.v_regs[ins.x] + ins.kk) & 0xFF
        self._goto_next_instruction()

    def _set_vx_to_vy(self, ins, **_):
        self.v_regs[ins.x] = self.v_regs[ins.y]
        self._goto_next_instruction()

    def _set_vx_or_vy(self, ins, **_):
        self.v_regs[ins.x] |= self.v_regs[ins.y]
        self._goto_next_instruction()

    def _set_vx_and_vy(self, ins, **_):
        self.v_regs[ins.x] &= self.v_regs[ins.y]
        self._goto_next_instruction()

    def _set_vx_xor_vy(self, ins, **_):
        self.v_regs[ins.x] ^= self.v_regs[ins.y]
        self._goto_next_instruction()

    # flags are computed from the operands before Vx is written
    # ADD writes VF after the result, SUB, SUBN, SHR and SHL write it before
    def _add_vx_vy(self, ins, **_):
        total = self.v_regs[ins.x] + self.v_regs[ins.y]
        self.v_regs[ins.x] = total & 0xFF
        self.v_regs[0xF] = 1 if total > 0xFF else 0
        self._goto_next_instruction()

    def _sub_vx_vy(self, ins, **_):
        vx, vy = self.v_regs[ins.x], self.v_regs[ins.y]
        self.v_regs[0xF] = 1 if vx > vy else 0
        self.v_regs[ins.x] = (vx - vy) & 0xFF
        self._goto_next_instruction()

    def _subn_vx_vy(self, ins, **_):
        vx, vy = self.v_regs[ins.x], self.v_regs[ins.y]
        self.v_regs[0xF] = 1 if vy > vx else 0
        self.v_regs[ins.x] = (vy - vx) & 0xFF
        self._goto_next_instruction()

    def _shr(self, ins, **_):
        vx = self.v_regs[ins.x]
        self.v_regs[0xF] = vx & 0x1
        self.v_regs[ins.x] = vx >> 1
        self._goto_next_instruction()

    def _shl(self, ins, **_):
        vx = self.v_regs[ins.x]
        self.v_regs[0xF] = (vx & 0x80) >> 7
        self.v_regs[ins.x] = (vx << 1) & 0xFF
        self._goto_next_instruction()

    def _set_idx(self, ins, **_):
        self.idx = ins.nnn
        self._goto_next_instruction()

    def _jump_plus(self, ins, **_):
        self.pc = ins.nnn + self.v_regs[0x0]

    def _random_byte_and(self, ins, **_):
        self.v_regs[ins.x] = random.randint(0, 255) & ins.kk
        self._goto_next_instruction()

    def _to_screen(self, ins, memory, display, **_):
        """display n-byte sprite starting at memory location I at (Vx, Vy), set VF = collision"""
        sprite = memory.read_block(self.idx, ins.n)
        self.v_regs[0xF] = display.draw_sprite(self.v_regs[ins.x], self.v_regs[ins.y], sprite)
        self._goto_next_instruction()

    def _skip_if_pressed(self, ins, keypad, **_):
        self._skip_next_instruction_if(keypad.is_down(self.v_regs[ins.x] & 0xF))

    def _skip_if_not_pressed(self, ins, keypad, **_):
        self._skip_next_instruction_if(not keypad.is_down(self.v_regs[ins.x] & 0xF))

    def _wait_keypress(self, ins, keypad, **_):
        """store the lowest pressed key in Vx, or stay on this instruction until a key is pressed"""
        for key in range(KEY_COUNT):
            if keypad.is_down(key):
                self.v_regs[ins.x] = key
                self._goto_next_instruction()
                break

    def _set_vx_dt(self, ins, **_):
        self.v_regs[ins.x] = self.delay_timer
        self._goto_next_instruction()

    def _set_dt_vx(self, ins, **_):
        self.delay_timer = self.v_regs[ins.x]
        self.delay_timer_f = float(self.delay_timer)
        self._goto_next_instruction()

    def _set_st(self, ins, **_):
        self.sound_timer = self.v_regs[ins.x]
        self.sound_timer_f = float(self.sound_timer)
        self._goto_next_instruction()

    def _add_to_idx(self, ins, **_):
        self.idx = (self.idx + self.v_regs[ins.x]) & 0xFFFF
        self._goto_next_instruction()

    def _select_char(self, ins, **_):
        self.idx = self.v_regs[ins.x] * FONT_WIDTH     # each character font is made of 5 bytes
        self._goto_next_instruction()

    def _bcd_repr(self, ins, memory, **_):
        """hundreds digit of Vx at I, tens digit at I+1, ones digit at I+2"""
        vx = self.v_regs[ins.x]
        memory.write(self.idx, vx // 100)
        memory.write(self.idx + 1, (vx // 10) % 10)
        memory.write(self.idx + 2, vx % 10)
        self._goto_next_instruction()

    def _store_vregs(self, ins, memory, **_):
        """store registers V0 through Vx (included) in memory starting at location I"""
        for index in range(ins.x + 1):
            memory.write(self.idx + index, self.v_regs[index])
        self.idx = (self.idx + ins.x + 1) & 0xFFFF
        self._goto_next_instruction()

    def _load_vregs(self, ins, memory, **_):
        """read registers V0 through Vx (included) from memory starting at location I"""
        for index in range(ins.x + 1):
            self.v_regs[index] = memory.read(self.idx + index)
        self.idx = (self.idx + ins.x + 1) & 0xFFFF
        self._goto_next_instruction()
