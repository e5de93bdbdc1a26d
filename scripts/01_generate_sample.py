from __future__ import annotations

from markov_text import ChainConfig, ChainModel


def main() -> None:
    corpus = (
        "the cat sat on the mat\n"
        "the dog sat on the log\n"
        "a cat and a dog met on the mat\n"
    )

    model = ChainModel(ChainConfig(seed=7)).build(corpus)
    print("TABLES:", model.num_tokens())
    print(model.inspect())
    print()

    for _ in range(3):
        line = model.generate(30, stop_at_boundary=True)
        print("LINE:", model.format_tokens(line).strip())


if __name__ == "__main__":
    main()
