"""
타원곡선 점 위의 버터플라이 라운드
==================================

스칼라 FFT의 한 단계를 타원곡선 점에 직접 적용한다.
블록 크기 k = 2^r 의 각 블록에서 k/2 만큼 떨어진 쌍 (P, Q)를

    P ← P + Q
    Q ← P - Q

로 덮어쓴다. 스칼라 버터플라이 y = a ± ω^j·b 의 군(group) 버전이며,
ω^j 곱셈은 라운드 시작의 "twist"(distribute_powers)가 미리 처리한다.

**배치 역원 (Montgomery's trick)**:
  아핀 덧셈 P ± Q 는 쌍마다 (x2 - x1)^{-1} 이 필요하다.
  라운드의 모든 역원을 역원 한 번 + 곱셈으로 처리한다.

  ┌─────────────────────────────────────────────────────────────┐
  │  1. 전진 패스: 누적자 acc = Π (x2 - x1) 를 쌓으며            │
  │     각 쌍의 분자에 "이전까지의" acc 를 곱해 둔다             │
  ├─────────────────────────────────────────────────────────────┤
  │  2. acc^{-1} 을 딱 한 번 계산 (0이면 FieldError)            │
  ├─────────────────────────────────────────────────────────────┤
  │  3. 후진 패스: 역순으로 acc 에서 각 쌍의 (x2-x1) 을 벗겨내며 │
  │     개별 (x2 - x1)^{-1} 을 복원하고 기울기 공식을 적용       │
  └─────────────────────────────────────────────────────────────┘

작업 버퍼는 좌표를 담은 두 개의 평평한 리스트 xs, ys 이다.
스크래치 버퍼도 (블록 수 × half) 크기의 평평한 리스트이며
``half * block + j`` 오프셋으로 접근한다.
"""

from lagrange_srs.errors import FieldError, InvalidParameters
from lagrange_srs.field import FQ, ec_mul


def distribute_powers(xs, ys, start, stop, g):
    """점 xs/ys[start:stop]의 i번째 점(i ≥ 1)에 g^i 를 곱한다.

    첫 번째 점(i = 0)은 그대로 둔다. 각 점의 갱신은 서로 독립이다.

    Args:
        xs, ys: 점 좌표 리스트 (제자리에서 수정)
        start, stop: 대상 구간 [start, stop)
        g: 스칼라 (FR)
    """
    power = g
    for idx in range(start + 1, stop):
        point = ec_mul((xs[idx], ys[idx]), power)
        if point is None:
            raise InvalidParameters(f"point {idx} became the point at infinity")
        xs[idx], ys[idx] = point
        power = power * g


def _twist_block(xs, ys, block, k, g):
    # 블록의 위쪽 절반에만 적용
    base = block * k
    distribute_powers(xs, ys, base + (k >> 1), base + k, g)


def _forward_block(xs, ys, scratch_x, scratch_y, block, half, acc):
    base = 2 * half * block
    for j in range(half):
        p = base + j
        q = p + half
        s = half * block + j

        scratch_x[s] = xs[p] + xs[q]
        scratch_y[s] = (ys[q] - ys[p]) * acc
        xs[q] = xs[q] - xs[p]
        ys[q] = (ys[q] + ys[p]) * -acc
        acc = acc * xs[q]
    return acc


def _backward_block(xs, ys, scratch_x, scratch_y, block, half, acc):
    base = 2 * half * block
    for j in reversed(range(half)):
        p = base + j
        q = p + half
        s = half * block + j

        # -(y2 + y1) / (x2 - x1): P - Q 의 기울기
        slope_diff = ys[q] * acc
        # (y2 - y1) / (x2 - x1): P + Q 의 기울기
        slope_sum = scratch_y[s] * acc
        acc = acc * xs[q]

        x1, y1 = xs[p], ys[p]
        x_sum = scratch_x[s]

        x3 = slope_diff * slope_diff - x_sum
        xs[q] = x3
        ys[q] = slope_diff * (x1 - x3) - y1

        x3 = slope_sum * slope_sum - x_sum
        xs[p] = x3
        ys[p] = slope_sum * (x1 - x3) - y1
    return acc


def fft_round(xs, ys, g, round_number, is_first_round=False):
    """FFT 버터플라이 한 라운드를 점 리스트에 제자리로 적용한다.

    Args:
        xs, ys: 아핀 좌표 리스트 (길이는 2^round_number 의 배수)
        g: 이 라운드의 단위근 거듭제곱 (FR)
        round_number: 라운드 번호 r (블록 크기 k = 2^r)
        is_first_round: True이면 twist를 건너뛴다.
                        첫 라운드는 half = 1 이라 twist가 항등 연산이다.

    Raises:
        FieldError: 배치 역원 누적자가 0일 때 (두 피연산자의 x좌표가 같음)
    """
    k = 1 << round_number
    half = k >> 1
    block_count = len(xs) // k

    if not is_first_round:
        for block in range(block_count):
            _twist_block(xs, ys, block, k, g)

    scratch_x = [FQ(0)] * (block_count * half)
    scratch_y = [FQ(0)] * (block_count * half)

    acc = FQ(1)
    for block in range(block_count):
        acc = _forward_block(xs, ys, scratch_x, scratch_y, block, half, acc)

    if acc == FQ(0):
        raise FieldError("Could not invert batch inversion accumulator")
    acc = FQ(1) / acc

    for block in reversed(range(block_count)):
        acc = _backward_block(xs, ys, scratch_x, scratch_y, block, half, acc)
