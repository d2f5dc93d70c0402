import operator

import pyarrow as pa

from doubleframe import DoubleDataFrame

shops = pa.table({
    "n_employees": [10, 15, 8, 12, 20],
    "revenue": [120.5, 300.0, 80.25, 150.0, 410.75],
})

df = DoubleDataFrame.from_arrow(shops) \
  .compute_column("revenue_per_employee", lambda row: row["revenue"] / row["n_employees"]) \
  .select(lambda row: row["revenue_per_employee"] > 12)

print(df)
print(df.project(["revenue"]).summarize("total", operator.add))
print(df.summarize("max", max))
