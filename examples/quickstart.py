# %% [markdown]
# # fuzzygram quickstart
#
# Two families of scores:
#
# | Family | Space | Members |
# |--------|-------|---------|
# | Q-gram distances | distance (0 = identical) | QGram, Cosine, Jaccard |
# | Modifiers | similarity (1 = identical) | Partial, TokenSort, TokenSet, TokenMax |
#
# Modifiers wrap any base metric, including other modifiers.

# %%
import polars as pl

import fuzzygram as fg
from fuzzygram import batch
from fuzzygram.polars_api import batch_similarity

# %% [markdown]
# ## Q-gram distances
#
# "night" and "nacht" share only the bigram "ht".

# %%
print("qgram:  ", fg.qgram("night", "nacht"))
print("cosine: ", fg.cosine("night", "nacht"))
print("jaccard:", round(fg.jaccard("night", "nacht"), 3))

# %% [markdown]
# ## Modifiers
#
# Partial finds the best-aligned window; token modifiers ignore word order.

# %%
ro = fg.RatcliffObershelp()
print("partial:   ", fg.compare(fg.Partial(ro), "yankees", "new york yankees"))
print("token sort:", fg.compare(fg.TokenSort(ro), "new york mets", "mets new york"))
print("token set: ", fg.compare(fg.TokenSet(ro), "mariners", "seattle mariners"))
print("token max: ", fg.compare(fg.TokenMax(ro), "pulp ficton", "Pulp Fiction (1994)"))

# %% [markdown]
# ## Batch and Polars

# %%
movies = ["The Shawshank Redemption", "The Godfather", "Pulp Fiction", "The Dark Knight"]
for match in batch.best_matches(movies, "pulp ficton", modifier="token_max", limit=2):
    print(f"{match.text}: {match.score:.2f}")

df = pl.DataFrame({"a": ["new york mets", "fuzzy wuzzy"], "b": ["mets new york", "wuzzy fuzzy bear"]})
print(df.with_columns(score=batch_similarity(df["a"], df["b"], modifier="token_set")))
