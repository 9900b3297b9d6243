# src/retro_chip8/arch/chip8/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。
"""
from . import load
from . import alu
from . import control
from . import io
from .base import InstructionKind

# @intent:map 上位ニブル(命令ファミリ)から (判別用マスク, デコード関数テーブル) へのマッピング。
# @intent:rationale ファミリごとに判別に使うビットが異なるため、マスクを掛けた値でテーブルを引きます。
#                  テーブルに存在しない組み合わせは未知の命令となります（例: 0x0000, 0x5xy1, 0x8xyF）。
DECODE_MAP = {
    0x0: (0x0FFF, {
        0x0E0: io.decode_cls,
        0x0EE: control.decode_ret,
    }),
    0x1: (0x0000, {0x0000: control.decode_jp}),
    0x2: (0x0000, {0x0000: control.decode_call}),
    0x3: (0x0000, {0x0000: control.decode_se_vx_kk}),
    0x4: (0x0000, {0x0000: control.decode_sne_vx_kk}),
    0x5: (0x000F, {0x0: control.decode_se_vx_vy}),
    0x6: (0x0000, {0x0000: load.decode_ld_vx_kk}),
    0x7: (0x0000, {0x0000: alu.decode_add_vx_kk}),
    0x8: (0x000F, {
        0x0: load.decode_ld_vx_vy,
        0x1: alu.decode_or,
        0x2: alu.decode_and,
        0x3: alu.decode_xor,
        0x4: alu.decode_add_vx_vy,
        0x5: alu.decode_sub,
        0x6: alu.decode_shr,
        0x7: alu.decode_subn,
        0xE: alu.decode_shl,
    }),
    0x9: (0x000F, {0x0: control.decode_sne_vx_vy}),
    0xA: (0x0000, {0x0000: load.decode_ld_i}),
    0xB: (0x0000, {0x0000: control.decode_jp_v0}),
    0xC: (0x0000, {0x0000: alu.decode_rnd}),
    0xD: (0x0000, {0x0000: io.decode_drw}),
    0xE: (0x00FF, {
        0x9E: io.decode_skp,
        0xA1: io.decode_sknp,
    }),
    0xF: (0x00FF, {
        0x07: io.decode_ld_vx_dt,
        0x0A: io.decode_ld_vx_k,
        0x15: io.decode_ld_dt_vx,
        0x18: io.decode_ld_st_vx,
        0x1E: alu.decode_add_i_vx,
        0x29: load.decode_ld_f_vx,
        0x33: load.decode_ld_b_vx,
        0x55: load.decode_ld_i_vx,
        0x65: load.decode_ld_vx_i,
    }),
}

# @intent:map 命令種別から実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Control
    InstructionKind.RET: control.execute_ret,
    InstructionKind.JP: control.execute_jp,
    InstructionKind.CALL: control.execute_call,
    InstructionKind.SE_VX_KK: control.execute_se_vx_kk,
    InstructionKind.SNE_VX_KK: control.execute_sne_vx_kk,
    InstructionKind.SE_VX_VY: control.execute_se_vx_vy,
    InstructionKind.SNE_VX_VY: control.execute_sne_vx_vy,
    InstructionKind.JP_V0: control.execute_jp_v0,

    # Load
    InstructionKind.LD_VX_KK: load.execute_ld_vx_kk,
    InstructionKind.LD_VX_VY: load.execute_ld_vx_vy,
    InstructionKind.LD_I: load.execute_ld_i,
    InstructionKind.LD_F_VX: load.execute_ld_f_vx,
    InstructionKind.LD_B_VX: load.execute_ld_b_vx,
    InstructionKind.LD_I_VX: load.execute_ld_i_vx,
    InstructionKind.LD_VX_I: load.execute_ld_vx_i,

    # ALU
    InstructionKind.ADD_VX_KK: alu.execute_add_vx_kk,
    InstructionKind.OR: alu.execute_or,
    InstructionKind.AND: alu.execute_and,
    InstructionKind.XOR: alu.execute_xor,
    InstructionKind.ADD_VX_VY: alu.execute_add_vx_vy,
    InstructionKind.SUB: alu.execute_sub,
    InstructionKind.SHR: alu.execute_shr,
    InstructionKind.SUBN: alu.execute_subn,
    InstructionKind.SHL: alu.execute_shl,
    InstructionKind.RND: alu.execute_rnd,
    InstructionKind.ADD_I_VX: alu.execute_add_i_vx,

    # I/O
    InstructionKind.CLS: io.execute_cls,
    InstructionKind.DRW: io.execute_drw,
    InstructionKind.SKP: io.execute_skp,
    InstructionKind.SKNP: io.execute_sknp,
    InstructionKind.LD_VX_K: io.execute_ld_vx_k,
    InstructionKind.LD_VX_DT: io.execute_ld_vx_dt,
    InstructionKind.LD_DT_VX: io.execute_ld_dt_vx,
    InstructionKind.LD_ST_VX: io.execute_ld_st_vx,
}
