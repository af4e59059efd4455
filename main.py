from powerheap import PowerHeap, run_benchmark


print("Running power-of-two heap self-checks...")
for result in run_benchmark():
    print(f"\nexponent = {result.exponent} (d = {result.branching_factor})")
    print(f"Correct: {result.correct}")
    print(f"Time to pop {result.size} items: {result.elapsed_ms:.2f} ms")
    print(f"Final heap size: {result.final_size}")
    print(f"Pop on empty raises: {result.empty_pop_raised}")

# Small, predictable sequence with a duplicate maximum (d = 4)
heap = PowerHeap(2)
for value in [10, 40, 20, 5, 40]:
    heap.insert(value)

print(f"\nSmall heap content: {heap!r}")
print("Popping all:")
while not heap.is_empty():
    print(f"  {heap.pop_max()}")
