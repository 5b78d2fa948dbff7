# graphwiz/attributes.py
"""
Names of the Graphviz DOT attributes.

Each constant holds the attribute key, so callers can write
``attrs.FILLCOLOR`` instead of a bare string.
See https://graphviz.org/doc/info/attrs.html
"""

AREA = "area"
ARROWHEAD = "arrowhead"
ARROWSIZE = "arrowsize"
ARROWTAIL = "arrowtail"
BACKGROUND = "_background"
BB = "bb"
BEAUTIFY = "beautify"
BGCOLOR = "bgcolor"
CENTER = "center"
CHARSET = "charset"
CLUSTERRANK = "clusterrank"
COLOR = "color"
COLORSCHEME = "colorscheme"
COMMENT = "comment"
COMPOUND = "compound"
CONCENTRATE = "concentrate"
CONSTRAINT = "constraint"
DAMPING = "Damping"
DECORATE = "decorate"
DEFAULTDIST = "defaultdist"
DIM = "dim"
DIMEN = "dimen"
DIR = "dir"
DIREDGECONSTRAINTS = "diredgeconstraints"
DISTORTION = "distortion"
DPI = "dpi"
EDGEURL = "edgeURL"
EDGEHREF = "edgehref"
EDGETARGET = "edgetarget"
EDGETOOLTIP = "edgetooltip"
EPSILON = "epsilon"
ESEP = "esep"
FILLCOLOR = "fillcolor"
FIXEDSIZE = "fixedsize"
FONTCOLOR = "fontcolor"
FONTNAME = "fontname"
FONTNAMES = "fontnames"
FONTPATH = "fontpath"
FONTSIZE = "fontsize"
FORCELABELS = "forcelabels"
GRADIENTANGLE = "gradientangle"
GROUP = "group"
HEADURL = "headURL"
HEAD_LP = "head_lp"
HEADCLIP = "headclip"
HEADHREF = "headhref"
HEADLABEL = "headlabel"
HEADPORT = "headport"
HEADTARGET = "headtarget"
HEADTOOLTIP = "headtooltip"
HEIGHT = "height"
HREF = "href"
IMAGE = "image"
IMAGEPATH = "imagepath"
IMAGEPOS = "imagepos"
IMAGESCALE = "imagescale"
INPUTSCALE = "inputscale"
CLUSTER = "cluster"
K = "K"
LABEL = "label"
LABELURL = "labelURL"
LABEL_SCHEME = "label_scheme"
LABELANGLE = "labelangle"
LABELDISTANCE = "labeldistance"
LABELFLOAT = "labelfloat"
LABELFONTCOLOR = "labelfontcolor"
LABELFONTNAME = "labelfontname"
LABELFONTSIZE = "labelfontsize"
LABELHREF = "labelhref"
LABELJUST = "labeljust"
LABELLOC = "labelloc"
LABELTARGET = "labeltarget"
LABELTOOLTIP = "labeltooltip"
LANDSCAPE = "landscape"
LAYER = "layer"
LAYERLISTSEP = "layerlistsep"
LAYERS = "layers"
LAYERSELECT = "layerselect"
LAYERSEP = "layersep"
LAYOUT = "layout"
LEN = "len"
LEVELS = "levels"
LEVELSGAP = "levelsgap"
LHEAD = "lhead"
LHEIGHT = "lheight"
LINELENGTH = "linelength"
LP = "lp"
LTAIL = "ltail"
LWIDTH = "lwidth"
MARGIN = "margin"
MAXITER = "maxiter"
MCLIMIT = "mclimit"
MINDIST = "mindist"
MINLEN = "minlen"
MODE = "mode"
MODEL = "model"
NEWRANK = "newrank"
NODESEP = "nodesep"
NOJUSTIFY = "nojustify"
NORMALIZE = "normalize"
NOTRANSLATE = "notranslate"
NSLIMIT = "nslimit"
NSLIMIT1 = "nslimit1"
ONEBLOCK = "oneblock"
ORDERING = "ordering"
ORIENTATION = "orientation"
OUTPUTORDER = "outputorder"
OVERLAP = "overlap"
OVERLAP_SCALING = "overlap_scaling"
OVERLAP_SHRINK = "overlap_shrink"
PACK = "pack"
PACKMODE = "packmode"
PAD = "pad"
PAGE = "page"
PAGEDIR = "pagedir"
PENCOLOR = "pencolor"
PENWIDTH = "penwidth"
PERIPHERIES = "peripheries"
PIN = "pin"
POS = "pos"
QUADTREE = "quadtree"
QUANTUM = "quantum"
RANK = "rank"
RANKDIR = "rankdir"
RANKSEP = "ranksep"
RATIO = "ratio"
RECTS = "rects"
REGULAR = "regular"
REMINCROSS = "remincross"
REPULSIVEFORCE = "repulsiveforce"
RESOLUTION = "resolution"
ROOT = "root"
ROTATE = "rotate"
ROTATION = "rotation"
SAMEHEAD = "samehead"
SAMETAIL = "sametail"
SAMPLEPOINTS = "samplepoints"
SCALE = "scale"
SEARCHSIZE = "searchsize"
SEP = "sep"
SHAPE = "shape"
SHAPEFILE = "shapefile"
SHOWBOXES = "showboxes"
SIDES = "sides"
SIZE = "size"
SKEW = "skew"
SMOOTHING = "smoothing"
SORTV = "sortv"
SPLINES = "splines"
START = "start"
STYLE = "style"
STYLESHEET = "stylesheet"
SVGCLASS = "class"
SVGID = "id"
TAILURL = "tailURL"
TAIL_LP = "tail_lp"
TAILCLIP = "tailclip"
TAILHREF = "tailhref"
TAILLABEL = "taillabel"
TAILPORT = "tailport"
TAILTARGET = "tailtarget"
TAILTOOLTIP = "tailtooltip"
TARGET = "target"
TBBALANCE = "TBbalance"
TOOLTIP = "tooltip"
TRUECOLOR = "truecolor"
URL = "URL"
VERTICES = "vertices"
VIEWPORT = "viewport"
VORO_MARGIN = "voro_margin"
WEIGHT = "weight"
WIDTH = "width"
XDOTVERSION = "xdotversion"
XLABEL = "xlabel"
XLP = "xlp"
Z = "z"
