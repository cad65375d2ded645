# This file holds the fixed JavaScript which surrounds every compiled program.

# Defines the 'add' function which programs may call.
RUNTIME = "function add(x,y) { return x + y };"

# Calls the compiled function 'f' and logs the result.
TEST = "console.log(f(1, 2));"
