# Histogram package initialization.
# Modules under this folder split the tool into testable pieces:
# - stats: counter helpers (bump, lookup-with-default, summary)
# - accumulator: per-character counts across input chunks
# - render: sort/threshold/format the final report
# - reader: pull chunks from a text stream into an accumulator
