import random
import time

import msgpack
import numpy as np

from seqmap import OrderedMap, dumps, loads

df = open("dict.tsv", "a")
sf = open("seqmap.tsv", "a")

def mkdataset(datasize):
  return OrderedMap([
    (random.randint(0, 1000000000), np.random.bytes(random.randint(0,50)))
    for _ in range(datasize)
  ])

def bench_dict(binary, datasize):
  s = time.time()
  msgpack.unpackb(binary, strict_map_key=False)
  t = time.time() - s

  df.write(f"{datasize}\t{t*1000:.5f}\n")
  df.flush()

def bench_seqmap(binary, datasize):
  s = time.time()
  loads(binary, format="msgpack")
  t = time.time() - s

  sf.write(f"{datasize}\t{t*1000:.5f}\n")
  sf.flush()

sz = 1
while sz < 1000000:
  data = mkdataset(sz)
  binary = dumps(data, format="msgpack")
  bench_dict(binary, sz)
  bench_seqmap(binary, sz)
  sz *= 2

sf.close()
df.close()
