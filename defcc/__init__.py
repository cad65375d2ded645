# defcc: compiles a single-function 'def ... end' program to JavaScript.
