"""
공유 유틸리티
=============

**주요 기능**:
  - bit_reverse: 인덱스의 하위 log_n 비트를 뒤집는다 (바이트 룩업 테이블)
  - bit_reverse_permutation: 리스트를 비트 반전 순서로 재배열
  - is_power_of_two / log2_exact: 크기 검증
  - setup_basic_logger: 스트림 핸들러가 붙은 로거

**비트 반전이 필요한 이유**:
  제자리(in-place) 버터플라이 네트워크는 비트 반전 순서의 입력을 받아
  자연 순서의 출력을 만든다. 예를 들어 n = 8 이면

      0 1 2 3 4 5 6 7  →  0 4 2 6 1 5 3 7
"""

import logging

from lagrange_srs.errors import InvalidParameters, SizeError


# 인덱스가 들어갈 수 있는 최대 비트 폭 (u64)
NATIVE_INDEX_BITS = 64
NATIVE_INDEX_BYTES = NATIVE_INDEX_BITS // 8

# 8비트 값을 역순으로 뒤집는 룩업 테이블: 0b00000001 → 0b10000000
BYTE_SWAP_TABLE = tuple(int(format(b, '08b')[::-1], 2) for b in range(256))


def bit_reverse(index, log_n):
    """index의 하위 log_n 비트를 역순으로 뒤집어 반환한다.

    완전한 바이트는 테이블로 뒤집고 순서도 뒤집는다. 최상위(불완전한)
    바이트를 먼저 넣은 뒤, 사용하지 않는 하위 (8 - log_n % 8) 비트를
    오른쪽 시프트로 버린다.

    Args:
        index: 0 ≤ index < 2^log_n
        log_n: 비트 수 (0 ≤ log_n ≤ 64)

    Returns:
        int: 비트가 반전된 인덱스

    Raises:
        InvalidParameters: index나 log_n을 u64 인덱스로 표현할 수 없을 때

    예시:
        >>> [bit_reverse(i, 3) for i in range(8)]
        [0, 4, 2, 6, 1, 5, 3, 7]
    """
    if not 0 <= log_n <= NATIVE_INDEX_BITS:
        raise InvalidParameters(
            f"log_n={log_n} is outside the native index width of {NATIVE_INDEX_BITS} bits"
        )

    num_bytes, leftover = divmod(log_n, 8)

    # 여분의 한 바이트: log_n = 64 일 때 bytes[num_bytes]가 0이 되도록
    try:
        raw = index.to_bytes(NATIVE_INDEX_BYTES + 1, 'little')
    except OverflowError as exc:
        raise InvalidParameters(
            f"could not convert index {index} to an unsigned {NATIVE_INDEX_BITS}-bit value"
        ) from exc
    if raw[NATIVE_INDEX_BYTES] != 0:
        raise InvalidParameters(
            f"could not convert index {index} to an unsigned {NATIVE_INDEX_BITS}-bit value"
        )

    reversed_bytes = bytearray([BYTE_SWAP_TABLE[raw[num_bytes]]])
    for i in range(num_bytes):
        reversed_bytes.append(BYTE_SWAP_TABLE[raw[num_bytes - 1 - i]])

    result = int.from_bytes(reversed_bytes, 'little')
    return result >> (8 - leftover)


def is_power_of_two(n):
    """n이 양의 2의 거듭제곱인지 확인한다."""
    return n > 0 and (n & (n - 1)) == 0


def log2_exact(n):
    """2의 거듭제곱 n의 log2. 그렇지 않으면 SizeError."""
    if not is_power_of_two(n):
        raise SizeError(f"the provided SRS size {n} was not a power of two")
    return n.bit_length() - 1


def bit_reverse_permutation(items):
    """items를 비트 반전 순서로 재배열한 새 리스트를 반환한다.

    result[i] = items[bit_reverse(i, log2(n))]
    """
    log_n = log2_exact(len(items))
    return [items[bit_reverse(i, log_n)] for i in range(len(items))]


def setup_basic_logger(name="lagrange_srs", level=logging.INFO):
    """
    기본 스트림 핸들러가 붙은 로거를 반환한다. 여러 번 호출해도 핸들러는 하나다.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        ch = logging.StreamHandler()
        fmt = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    return logger
