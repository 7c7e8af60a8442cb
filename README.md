# d3kit

Small building blocks for raw displays, terminals and disks. The package has
no dependencies outside the standard library.

## Modules

- `d3kit.color`: the frozen `Color` dataclass (`red`, `green`, `blue`,
  `alpha`, each 0..255). It decodes packed pixels with `from_rgb(rgb, bpp)`
  for 15, 16, 24 and 32 bits per pixel, or with `from_rgb_15`, `from_rgb_16`,
  `from_rgb_24` and `from_rgb_32`. It encodes with `rgb_15`, `rgb_16`,
  `rgb_24` and `rgb_32`. `bright()` and `dim()` shift each channel by 85 and
  stop at the ends of the range. `with_alpha(alpha)` changes only the alpha.
  `blend(color)` puts `color` over this one by alpha. The module also defines
  the constants `INVISIBLE`, `BLACK`, `RED`, `GREEN`, `YELLOW`, `BROWN`,
  `BLUE`, `MAGENTA`, `CYAN`, `WHITE`, `HHU_BLUE` and `HHU_GREEN`.
- `d3kit.palette`: `COLOR_TABLE_256`, the 256-color ANSI palette. It holds
  16 basic colors, a 6×6×6 color cube and 24 grays. `color_from_index(index)`
  looks up a color and raises `IndexError` outside 0..255.
- `d3kit.ansi`: escape sequence constants such as `RESET`, `FOREGROUND_RED`
  and `BACKGROUND_BRIGHT_BLUE`. The functions `fg_8bit_color` and
  `bg_8bit_color` take a palette index and raise `ValueError` outside
  0..255. The functions `fg_24bit_color` and `bg_24bit_color` take a `Color`.
  The module also has the enums `Color8`, `GraphicRendition` and `Key`.
- `d3kit.lfb`: `LinearFrameBuffer(buffer, pitch, width, height, bpp)` works
  over any writable buffer, such as a `bytearray`. `draw_pixel` ignores
  pixels off the screen and fully transparent colors, and blends translucent
  ones with what is already there. `read_pixel` raises `IndexError` out of
  bounds. The class also has `fill_rect`, `clear` and
  `scroll_up(lines)`.
- `d3kit.buffered_lfb`: `BufferedFrameBuffer(target)` has an off-screen
  `lfb` to draw into. `flush_lines(start, count)` and `flush()` copy its
  rows to `target`.
- `d3kit.syscalls`: system call numbers (`SystemCall`, `NUM_SYSCALLS`) and
  error codes (`Errno`, where any unknown code maps to `EUNKN`).
  `check_ret_code(ret_code)` returns a non-negative code and raises
  `SyscallError` for a negative one. `ret_code_of(result)` turns a value, an
  `Errno` or a `SyscallError` back into a return code.
- `d3kit.naming`: the flags `OpenOptions` and the enums `SeekOrigin` and
  `FileType`. `seek_origin(value)` falls back to `SeekOrigin.START` for
  unknown values. `RawDirent` is a type word followed by a 256-byte name,
  and `to_bytes` / `from_bytes` convert it to and from bytes.
  `DirEntry.from_dirent` decodes a record. It returns `None` for an
  unsupported type or an empty name.
- `d3kit.block`: the abstract `BlockDevice`, with `read(sector, count)`,
  `write(sector, data)`, `sector_count` and `sector_size`. `RamDisk` is an
  in-memory device. `Partition` limits reads and writes to its own range of
  sectors. The module also has `PartitionEntry`, `parse_mbr(data)` and
  `scan_partitions(device)`, which returns `[]` when there is no valid MBR.
  `lba_to_chs` converts a block address to a cylinder, head and sector.
- `d3kit.storage`: `StorageRegistry`. `add_block_device(typ, drive)`
  registers a drive as `<typ><n>` (`ata0`, `ata1`, ...) and each of its MBR
  partitions as `<typ><n>p<i>`, and returns the drive's name.
  `block_device(name)` returns the device or `None`.

## Examples

```python
from d3kit.color import Color
from d3kit.lfb import LinearFrameBuffer

fb = LinearFrameBuffer(bytearray(32 * 8), pitch=32, width=8, height=8, bpp=32)
fb.fill_rect(0, 0, 4, 4, Color(170, 0, 0, 255))
print(fb.read_pixel(1, 1))  # Color(red=170, green=0, blue=0, alpha=255)
```

```python
import struct

from d3kit.block import RamDisk
from d3kit.storage import StorageRegistry

disk = RamDisk(sector_count=2048, sector_size=512)
mbr = bytearray(512)
mbr[446 + 4] = 0x0E                             # partition type
struct.pack_into("<II", mbr, 446 + 8, 64, 1024)  # start sector, sector count
mbr[510:512] = b"\x55\xaa"
disk.write(0, bytes(mbr))

registry = StorageRegistry()
print(registry.add_block_device("ata", disk))           # ata0
print(registry.block_device("ata0p0").sector_count)     # 1024
```

## What it does not do

- Frame buffers draw pixels and rectangles only. There is no font, and no
  text or character drawing.
- `d3kit.syscalls` and `d3kit.naming` define numbers, codes and record
  layouts. Nothing in the package issues system calls or opens files.
- The only block device is the in-memory `RamDisk`. There are no disk
  drivers and no filesystem.

## Install and test

```
pip install .[test]
pytest
```