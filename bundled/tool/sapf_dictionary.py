# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
"""Embedded SAPF word dictionary.

Maps a category name to its description and the words it provides, each
with a short documentation string. Parsed once by `sapf_knowledge`.
"""

VALUES_JSON = r"""
{
    "math": {
        "description": "Math operators",
        "items": {
            "add": "Adds two numbers. ( a b --> a+b )",
            "sub": "Subtracts b from a. ( a b --> a-b )",
            "mul": "Multiplies two numbers. ( a b --> a*b )",
            "div": "Divides a by b. ( a b --> a/b )",
            "mod": "Modulo of a by b. ( a b --> a mod b )",
            "neg": "Negates a number. ( a --> -a )",
            "abs": "Absolute value. ( a --> |a| )",
            "sqrt": "Square root. ( a --> sqrt(a) )",
            "pow": "Raises a to the power b. ( a b --> a^b )",
            "min": "Minimum of two numbers. ( a b --> min(a,b) )",
            "max": "Maximum of two numbers. ( a b --> max(a,b) )",
            "clip": "Clips a to the range [lo, hi]. ( a lo hi --> c )",
            "floor": "Rounds down to the nearest integer. ( a --> floor(a) )",
            "ceil": "Rounds up to the nearest integer. ( a --> ceil(a) )"
        }
    },
    "trig": {
        "description": "Trigonometric and exponential functions",
        "items": {
            "sin": "Sine. ( a --> sin(a) )",
            "cos": "Cosine. ( a --> cos(a) )",
            "tan": "Tangent. ( a --> tan(a) )",
            "atan2": "Arc tangent of y/x. ( y x --> atan2(y,x) )",
            "exp": "Natural exponential. ( a --> e^a )",
            "log": "Natural logarithm. ( a --> log(a) )",
            "log2": "Base 2 logarithm. ( a --> log2(a) )",
            "tanh": "Hyperbolic tangent. ( a --> tanh(a) )"
        }
    },
    "stack": {
        "description": "Stack manipulation words",
        "items": {
            "dup": "Duplicates the top of the stack. ( a --> a a )",
            "drop": "Removes the top of the stack. ( a --> )",
            "swap": "Exchanges the two top items. ( a b --> b a )",
            "over": "Copies the second item to the top. ( a b --> a b a )",
            "rot": "Rotates the third item to the top. ( a b c --> b c a )",
            "nip": "Removes the second item. ( a b --> b )",
            "tuck": "Copies the top below the second item. ( a b --> b a b )",
            "clear": "Empties the stack. ( ... --> )",
            "cleard": "Empties the stack except for the top item. ( ... a --> a )"
        }
    },
    "list": {
        "description": "List and stream operations",
        "items": {
            "ord": "Infinite stream of positive integers starting at 1. ( --> [1 2 3 ...] )",
            "nat": "Infinite stream of natural numbers starting at 0. ( --> [0 1 2 ...] )",
            "to": "Arithmetic series from a to b. ( a b --> [a ... b] )",
            "by": "Arithmetic series from start with step. ( start step --> [...] )",
            "N": "Takes the first n items of a list. ( list n --> list )",
            "size": "Number of items in a finite list. ( list --> n )",
            "reverse": "Reverses a finite list. ( list --> list )",
            "cyc": "Repeats a list forever. ( list --> list )",
            "flat": "Flattens nested lists one level. ( list --> list )",
            "pack": "Packs n stack items into a list. ( ... n --> list )",
            "un": "Unpacks a list onto the stack. ( list --> ... )",
            "map": "Applies a function to each item. ( list fn --> list )",
            "filter": "Keeps items for which the predicate is true. ( list fn --> list )",
            "reduce": "Folds a list with a binary function. ( list init fn --> x )"
        }
    },
    "osc": {
        "description": "Oscillator unit generators",
        "items": {
            "sinosc": "Sine oscillator. ( freq phase --> out )",
            "saw": "Band limited sawtooth oscillator. ( freq phase --> out )",
            "square": "Band limited square oscillator. ( freq phase --> out )",
            "tri": "Band limited triangle oscillator. ( freq phase --> out )",
            "pulse": "Band limited pulse oscillator. ( freq phase duty --> out )",
            "lfsaw": "Non band limited sawtooth, useful as a control signal. ( freq phase --> out )",
            "lftri": "Non band limited triangle, useful as a control signal. ( freq phase --> out )",
            "impulse": "Single sample impulses at a given frequency. ( freq phase --> out )"
        }
    },
    "noise": {
        "description": "Noise unit generators",
        "items": {
            "white": "White noise. ( --> out )",
            "pink": "Pink noise. ( --> out )",
            "brown": "Brown noise. ( --> out )",
            "dust": "Random impulses with an average density. ( density --> out )",
            "lfnoise0": "Step noise at a given frequency. ( freq --> out )",
            "lfnoise1": "Linearly interpolated noise at a given frequency. ( freq --> out )"
        }
    },
    "filter": {
        "description": "Filter unit generators",
        "items": {
            "lpf": "Second order low pass filter. ( in freq --> out )",
            "hpf": "Second order high pass filter. ( in freq --> out )",
            "bpf": "Band pass filter. ( in freq bw --> out )",
            "rlpf": "Resonant low pass filter. ( in freq rq --> out )",
            "rhpf": "Resonant high pass filter. ( in freq rq --> out )",
            "lag": "Exponential lag. ( in lagtime --> out )",
            "onepole": "One pole filter. ( in coef --> out )"
        }
    },
    "env": {
        "description": "Envelope generators",
        "items": {
            "adsr": "Attack decay sustain release envelope. ( atk dcy sus rel gate --> out )",
            "perc": "Percussive envelope. ( atk rel --> out )",
            "line": "Linear ramp from start to end over a duration. ( start end dur --> out )",
            "xline": "Exponential ramp from start to end over a duration. ( start end dur --> out )",
            "decay": "Exponential decay of an input impulse. ( in dur --> out )"
        }
    },
    "io": {
        "description": "Audio output and printing",
        "items": {
            "play": "Plays a signal on the audio output. ( signal --> )",
            "stop": "Stops all playing signals. ( --> )",
            "record": "Plays and records a signal to a file. ( signal --> )",
            "pr": "Prints the top of the stack. ( a --> )",
            "prstk": "Prints the whole stack. ( --> )",
            "plot": "Plots a finite signal or list. ( a --> )"
        }
    },
    "control": {
        "description": "Control flow and function words",
        "items": {
            "if": "Evaluates one of two functions depending on a condition. ( cond then else --> ... )",
            "do": "Evaluates a function for each item of a finite list. ( list fn --> )",
            "while": "Repeats a function while a predicate holds. ( pred fn --> )",
            "apply": "Applies a function to the stack. ( fn --> ... )",
            "def": "Binds a value to a name in the current scope. ( value name --> )"
        }
    }
}
"""
